from dataclasses import dataclass, asdict
from typing import Dict, Any
from sqlalchemy.orm import declarative_base, Mapped, mapped_column
from sqlalchemy import String, Text

Base = declarative_base()


class StorageSlot(Base):
    __tablename__ = "storage_slots"

    key: Mapped[str] = mapped_column(String(100), primary_key=True)
    value: Mapped[str] = mapped_column(Text, nullable=False)  # Stored as JSON string


@dataclass(frozen=True)
class Product:
    id: str
    name: str
    price: float
    image_url: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "price": self.price,
            "imageUrl": self.image_url,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Product":
        return cls(
            id=data["id"],
            name=data["name"],
            price=float(data["price"]),
            image_url=data["imageUrl"],
        )


@dataclass
class FormDraft:
    name: str = ""
    price: str = ""  # raw text as typed
    image_url: str = ""

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)
