# api/dependencies.py

from typing import Optional
from fastapi import Depends

from catalog.sa.database import Database
from catalog.services.catalog_service import CatalogService

_database: Optional[Database] = None

def get_database() -> Database:
    """Shared store gateway, created on first use from DATABASE_URL"""
    global _database
    if _database is None:
        _database = Database()
    return _database

def get_service(database: Database = Depends(get_database)) -> CatalogService:
    """Get a catalog service for a request.

    The service is stateless; each of its calls opens and closes its own
    transaction on the shared gateway.
    """
    return CatalogService(database)
