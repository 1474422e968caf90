import os
import tempfile

# keep the trace log out of the working tree
os.environ.setdefault("CATALOG_TRACE_LOG", os.path.join(tempfile.gettempdir(), "catalog-test-trace.log"))

import pytest
from sqlalchemy.orm import Session

from baseClass import StorageSlot
from catalog import CatalogController, CounterIdGenerator
from errors import StorageError
from productstore import SQLProductStore


def write_slot(store, value):
    """Put arbitrary text in the store's slot, bypassing encoding."""
    with Session(store.engine) as ses:
        ses.merge(StorageSlot(key=store.key, value=value))
        ses.commit()


class FakeStore:
    """In-memory ProductStore double that records every save."""

    def __init__(self, products=None):
        self.products = list(products or [])
        self.saves = 0
        self.fail = False

    def load(self):
        return list(self.products)

    def save(self, products):
        if self.fail:
            raise StorageError("disk full")
        self.products = list(products)
        self.saves += 1


@pytest.fixture
def sql_store(tmp_path):
    return SQLProductStore(f"sqlite:///{tmp_path / 'catalog.db'}")


@pytest.fixture
def fake_store():
    return FakeStore()


@pytest.fixture
def controller(sql_store):
    c = CatalogController(sql_store, id_generator=CounterIdGenerator())
    c.initialize()
    return c
