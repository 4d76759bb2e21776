# catalog/exceptions.py


class CatalogStoreError(Exception):
    """Base class for errors raised by the store gateway and repositories"""


class ConstraintViolation(CatalogStoreError):
    """A write would break a uniqueness or referential constraint"""


class StoreFailure(CatalogStoreError):
    """The underlying store failed (connectivity, timeout, unexpected error)"""
