from typing import Iterable

FILL_ALL_FIELDS = "Please fill in all fields"


class CatalogError(Exception):
    """Base class for everything the catalog raises to the page."""


class ValidationError(CatalogError):
    def __init__(self, fields: Iterable[str], message: str = FILL_ALL_FIELDS):
        self.fields = tuple(fields)
        super().__init__(message)


class NotFoundError(CatalogError):
    def __init__(self, product_id: str):
        self.product_id = product_id
        super().__init__(f"Product {product_id!r} not found.")


class CorruptPersistedState(CatalogError):
    """The persisted slot holds something that is not a product list."""


class StorageError(CatalogError):
    """Writing the slot failed; in-memory state was left as it was."""
