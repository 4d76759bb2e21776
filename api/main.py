# api/main.py
import logging
import os

from fastapi import FastAPI

from api.dependencies import get_database
from api.errors import store_failure_handler
from api.routes import authors, books
from catalog.exceptions import StoreFailure

logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO"))
logger = logging.getLogger(__name__)

app = FastAPI(title="Book Catalog")

app.include_router(books.router)
app.include_router(authors.router)
app.add_exception_handler(StoreFailure, store_failure_handler)

# Initialize database on startup
@app.on_event("startup")
async def startup_event():
    database = get_database()
    database.init_db()
    logger.info(f"Catalog store ready at {database.connection_string}")
