# api/errors.py

from fastapi import HTTPException, Request, status
from fastapi.responses import JSONResponse

from catalog.exceptions import StoreFailure
from catalog.services.results import ErrorKind, Result

STATUS_BY_KIND = {
    ErrorKind.VALIDATION: status.HTTP_400_BAD_REQUEST,
    ErrorKind.CONSTRAINT_VIOLATION: status.HTTP_400_BAD_REQUEST,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
}

def unwrap(result: Result):
    """Return the result's value or raise the matching HTTPException"""
    if not result.ok:
        raise HTTPException(
            status_code=STATUS_BY_KIND[result.error.kind],
            detail=result.error.message
        )
    return result.value

async def store_failure_handler(request: Request, exc: StoreFailure) -> JSONResponse:
    # Internal details stay in the server log
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": "The request could not be completed."}
    )
