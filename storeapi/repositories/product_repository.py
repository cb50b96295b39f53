"""Data access for products."""
from __future__ import annotations

from sqlalchemy.orm import Session

from storeapi.errors import NotFoundError
from storeapi.models import Category, Product


class ProductRepository:
    UPDATABLE_FIELDS = ("name", "description", "price", "category_id")

    def __init__(self, session: Session):
        self.session = session

    def get_all(self) -> list[Product]:
        return self.session.query(Product).order_by(Product.id.asc()).all()

    def get_by_id(self, product_id: int) -> Product:
        """Return the product or raise NotFoundError."""
        product = self.session.get(Product, product_id)
        if product is None:
            raise NotFoundError(f"Product with ID {product_id} not found")
        return product

    def get_by_name(self, name: str) -> Product | None:
        return self.session.query(Product).filter(Product.name == name).first()

    def get_category(self, category_id: int) -> Category | None:
        return self.session.get(Category, category_id)

    def create(self, product: Product) -> Product:
        self.session.add(product)
        self.session.commit()
        return product

    def update(self, product_id: int, data: dict) -> Product | None:
        # silent no-op when the product was removed in the meantime
        existing = self.session.get(Product, product_id)
        if existing is None:
            return None

        for field in self.UPDATABLE_FIELDS:
            if field in data:
                setattr(existing, field, data[field])
        self.session.commit()
        return existing

    def delete(self, product_id: int) -> None:
        product = self.session.get(Product, product_id)
        if product is not None:
            self.session.delete(product)
            self.session.commit()
