import json
import logging
import math
from typing import Any, List, Optional, Protocol, Sequence
from baseClass import Base, StorageSlot, Product
from config import DATABASE_URL, STORAGE_KEY
from errors import CorruptPersistedState, StorageError
from sqlalchemy import create_engine
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)


class ProductStore(Protocol):
    def load(self) -> List[Product]: ...

    def save(self, products: Sequence[Product]) -> None: ...


def encode_products(products: Sequence[Product]) -> str:
    return json.dumps([p.to_dict() for p in products])


def decode_products(raw: str) -> List[Product]:
    """Parse the slot text, raising CorruptPersistedState on anything but a product list."""
    try:
        data = json.loads(raw)
    except ValueError as e:
        raise CorruptPersistedState(f"not JSON: {e}") from e
    if not isinstance(data, list):
        raise CorruptPersistedState(f"expected a JSON array, got {type(data).__name__}")

    products = []
    seen = set()
    for i, item in enumerate(data):
        if not _is_product_record(item):
            raise CorruptPersistedState(f"entry {i} is not a product record")
        if item["id"] in seen:
            raise CorruptPersistedState(f"duplicate id {item['id']!r}")
        seen.add(item["id"])
        products.append(Product.from_dict(item))
    return products


def _is_product_record(item: Any) -> bool:
    if not isinstance(item, dict):
        return False
    for key in ("id", "name", "imageUrl"):
        if not isinstance(item.get(key), str):
            return False
    price = item.get("price")
    # bool is an int subclass
    if isinstance(price, bool) or not isinstance(price, (int, float)):
        return False
    return math.isfinite(price)


class SQLProductStore:
    def __init__(self, db_url: str = DATABASE_URL, key: str = STORAGE_KEY):
        self.key = key
        self.engine = create_engine(db_url, echo=False, future=True)
        # create tables defined in Base
        Base.metadata.create_all(self.engine)

    def load(self) -> List[Product]:
        raw = self._read()
        if raw is None:
            return []
        try:
            return decode_products(raw)
        except CorruptPersistedState as e:
            logger.warning("Error parsing stored products in slot %r: %s", self.key, e)
            return []

    def save(self, products: Sequence[Product]) -> None:
        payload = encode_products(products)
        try:
            with Session(self.engine) as ses:
                ses.merge(StorageSlot(key=self.key, value=payload))
                ses.commit()
        except SQLAlchemyError as e:
            raise StorageError(f"Could not save products to slot {self.key!r}: {e}") from e

    def clear(self) -> None:
        try:
            with Session(self.engine) as ses:
                slot = ses.get(StorageSlot, self.key)
                if slot is not None:
                    ses.delete(slot)
                    ses.commit()
        except SQLAlchemyError as e:
            raise StorageError(f"Could not clear slot {self.key!r}: {e}") from e

    def _read(self) -> Optional[str]:
        try:
            with Session(self.engine) as ses:
                slot = ses.get(StorageSlot, self.key)
                return slot.value if slot else None
        except SQLAlchemyError:
            logger.exception("Error reading slot %r", self.key)
            return None
