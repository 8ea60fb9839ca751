"""SQLAlchemy models for the product catalog.

Defines Category and Product tables for persistent storage.
"""

from datetime import datetime, timezone
from uuid import uuid4

from sqlalchemy import DateTime, Float, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from catalog_api.infrastructure.database import Base

UNKNOWN_CATEGORY_NAME = "Unknown"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Category(Base):
    """Product category.

    Attributes:
        id: Unique category identifier (UUID string).
        name: Display name.
        description: Optional description.
        created_at: Creation timestamp.
    """

    __tablename__ = "categories"

    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        default=lambda: str(uuid4()),
    )
    name: Mapped[str] = mapped_column(String(200), nullable=False, index=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
    )

    # Relationships
    products: Mapped[list["Product"]] = relationship(
        "Product",
        back_populates="category",
    )

    def __repr__(self) -> str:
        """String representation."""
        return f"<Category(id={self.id}, name={self.name})>"

    def to_dict(self) -> dict:
        """Convert to dictionary.

        Returns:
            Dictionary representation.
        """
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
        }


class Product(Base):
    """Product entity in the catalog.

    Attributes:
        id: Unique product identifier (UUID string).
        name: Product name.
        description: Product description.
        price: Original price.
        discount: Discount percentage (0-100).
        image: Image file name or URL.
        status: Free-form stock status (e.g. "active").
        category_id: Owning category.
        product_code: Code generated from the name at creation, unique.
        created_at: Creation timestamp.
        updated_at: Last update timestamp.
    """

    __tablename__ = "products"

    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        default=lambda: str(uuid4()),
    )
    name: Mapped[str] = mapped_column(String(500), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    price: Mapped[float] = mapped_column(Float, nullable=False)
    discount: Mapped[float] = mapped_column(Float, nullable=False, default=0)
    image: Mapped[str] = mapped_column(String(1000), nullable=False, default="")
    status: Mapped[str] = mapped_column(String(50), nullable=False, default="active", index=True)
    category_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("categories.id"),
        nullable=False,
        index=True,
    )
    product_code: Mapped[str] = mapped_column(String(100), nullable=False, unique=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
        onupdate=_utcnow,
    )

    # Relationships
    category: Mapped["Category"] = relationship("Category", back_populates="products")

    def __repr__(self) -> str:
        """String representation."""
        return f"<Product(id={self.id}, code={self.product_code}, name={self.name[:30]}...)>"

    @property
    def final_price(self) -> float:
        """Price after discount, rounded to cents."""
        return round(self.price * (1 - self.discount / 100), 2)

    @property
    def category_name(self) -> str:
        """Name of the joined category, or "Unknown" if it is missing."""
        return self.category.name if self.category is not None else UNKNOWN_CATEGORY_NAME

    def to_dict(self) -> dict:
        """Convert to the public product view.

        The category relationship must already be loaded.

        Returns:
            Dictionary representation.
        """
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "original_price": self.price,
            "final_price": self.final_price,
            "discount": self.discount,
            "image": self.image,
            "status": self.status,
            "category": self.category_id,
            "category_name": self.category_name,
            "product_code": self.product_code,
        }
