import logging
import math
import re
import time
from decimal import Decimal
from typing import Callable, List, Optional, Sequence, Tuple
from rapidfuzz import fuzz
from baseClass import Product, FormDraft
from errors import ValidationError, NotFoundError
from file_logger import log_trace
from productstore import ProductStore

logger = logging.getLogger(__name__)

PLACEHOLDER_PREVIEW = "https://via.placeholder.com/300x200?text=Invalid+Image"
PLACEHOLDER_THUMB = "https://via.placeholder.com/64?text=No+Image"

MSG_ADDED = "Product added successfully"
MSG_UPDATED = "Product updated successfully"
MSG_DELETED = "Product deleted successfully"

NUMBER_RE = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")


class TimestampIdGenerator:
    """Millisecond wall-clock ids, bumped so consecutive ids always increase."""

    def __init__(self, clock: Callable[[], float] = time.time):
        self._clock = clock
        self._last = 0

    def __call__(self) -> str:
        now = int(self._clock() * 1000)
        self._last = max(now, self._last + 1)
        return str(self._last)


class CounterIdGenerator:
    def __init__(self, start: int = 1):
        self._next = start

    def __call__(self) -> str:
        value = self._next
        self._next += 1
        return str(value)


def parse_draft(draft: FormDraft) -> Tuple[str, float, str]:
    """Validate a draft and return (name, price, image_url).

    Name and image URL are kept exactly as typed; only the price text is
    trimmed before parsing.
    """
    price_text = draft.price.strip()

    missing = [field for field, value in
               (("name", draft.name), ("price", price_text), ("image_url", draft.image_url)) if not value]
    if missing:
        raise ValidationError(missing)

    # decimal notation only, no "1_000", "inf" or "nan"
    if not NUMBER_RE.fullmatch(price_text):
        raise ValidationError(["price"], "Price must be a number")
    price = float(price_text)
    if not math.isfinite(price):
        raise ValidationError(["price"], "Price must be a number")
    if price < 0:
        raise ValidationError(["price"], "Price cannot be negative")
    return draft.name, price, draft.image_url


def price_to_text(price: float) -> str:
    # Same text a browser number input shows: 9.0 -> "9", 12.5 -> "12.5", 1e-05 -> "0.00001"
    if abs(price) >= 1e21 or (price != 0 and abs(price) < 1e-6):
        return repr(price)
    if price.is_integer():
        return str(int(price))
    return format(Decimal(repr(price)), "f")


def format_price(price: float) -> str:
    return f"${price:.2f}"


def search_products(products: Sequence[Product], query: str, threshold: int = 60) -> List[Product]:
    """Fuzzy match on product name, best matches first."""
    q = query.strip().lower()
    if not q:
        return list(products)
    scored = []
    for p in products:
        similarity = fuzz.partial_ratio(q, p.name.lower())
        if similarity >= threshold:
            scored.append((similarity, p))
    # sort is stable, so equal scores keep catalog order
    scored.sort(key=lambda x: x[0], reverse=True)
    return [p for _, p in scored]


class CatalogController:
    def __init__(self, store: ProductStore, id_generator: Optional[Callable[[], str]] = None):
        self.store = store
        self.id_generator = id_generator or TimestampIdGenerator()
        self._products: List[Product] = []
        self.edit_draft: Optional[FormDraft] = None

    @property
    def products(self) -> Tuple[Product, ...]:
        return tuple(self._products)

    def initialize(self) -> None:
        self._products = list(self.store.load())
        logger.info("Loaded %d products", len(self._products))

    def get(self, product_id: str) -> Product:
        for p in self._products:
            if p.id == product_id:
                return p
        raise NotFoundError(product_id)

    def add(self, draft: FormDraft) -> Product:
        name, price, image_url = parse_draft(draft)
        product = Product(id=self._new_id(), name=name, price=price, image_url=image_url)

        updated = self._products + [product]
        self.store.save(updated)
        self._products = updated
        log_trace("add", product.id, name=product.name, price=product.price)
        return product

    def remove(self, product_id: str) -> None:
        updated = [p for p in self._products if p.id != product_id]
        if len(updated) == len(self._products):
            return
        self.store.save(updated)
        self._products = updated
        log_trace("remove", product_id)

    def begin_edit(self, product_id: str) -> FormDraft:
        product = self.get(product_id)
        self.edit_draft = FormDraft(
            name=product.name,
            price=price_to_text(product.price),
            image_url=product.image_url,
        )
        return self.edit_draft

    def update(self, product_id: str, draft: FormDraft) -> Product:
        name, price, image_url = parse_draft(draft)
        current = self.get(product_id)
        product = Product(id=current.id, name=name, price=price, image_url=image_url)

        updated = [product if p.id == product_id else p for p in self._products]
        self.store.save(updated)
        self._products = updated
        self.edit_draft = None
        log_trace("update", product.id, name=product.name, price=product.price)
        return product

    def cancel_edit(self) -> None:
        self.edit_draft = None

    def _new_id(self) -> str:
        existing = {p.id for p in self._products}
        new_id = self.id_generator()
        while new_id in existing:
            new_id = self.id_generator()
        return new_id
