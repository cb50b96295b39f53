"""Data access for categories."""
from __future__ import annotations

from sqlalchemy.orm import Session, selectinload

from storeapi.errors import NotFoundError
from storeapi.models import Category


class CategoryRepository:
    """Category lookups and mutations bound to one request's session."""

    UPDATABLE_FIELDS = ("name",)

    def __init__(self, session: Session):
        self.session = session

    def get_all(self) -> list[Category]:
        return self.session.query(Category).order_by(Category.name.asc()).all()

    def get_by_id(self, category_id: int) -> Category:
        """Return the category or raise NotFoundError."""
        category = (
            self.session.query(Category)
            .options(selectinload(Category.products))
            .filter(Category.id == category_id)
            .first()
        )
        if category is None:
            raise NotFoundError(f"Category with ID {category_id} not found")
        return category

    def get_by_name(self, name: str) -> Category | None:
        return self.session.query(Category).filter(Category.name == name).first()

    def exists(self, category_id: int) -> bool:
        return self.session.get(Category, category_id) is not None

    def create(self, category: Category) -> Category:
        self.session.add(category)
        self.session.commit()
        return category

    def update(self, category_id: int, data: dict) -> Category | None:
        """
        Copy the known fields from ``data`` onto the stored category.
        Does nothing (and returns None) when the row no longer exists.
        """
        existing = self.session.get(Category, category_id)
        if existing is None:
            return None

        for field in self.UPDATABLE_FIELDS:
            if field in data:
                setattr(existing, field, data[field])
        self.session.commit()
        return existing

    def delete(self, category_id: int) -> None:
        category = self.session.get(Category, category_id)
        if category is not None:
            self.session.delete(category)
            self.session.commit()
