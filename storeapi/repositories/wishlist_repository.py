"""
Data access for wishlists and their product memberships.

A wishlist is always loaded together with its ``WishlistProduct`` rows (and
the products behind them), so membership changes are plain list mutations on
``wishlist.wishlist_products`` followed by an explicit commit.
"""
from __future__ import annotations

from sqlalchemy import exists
from sqlalchemy.orm import Session, selectinload

from storeapi.errors import NotFoundError
from storeapi.models import Product, Wishlist, WishlistProduct


def _with_products():
    return selectinload(Wishlist.wishlist_products).selectinload(WishlistProduct.product)


class WishlistRepository:
    def __init__(self, session: Session):
        self.session = session

    def get_all(self) -> list[Wishlist]:
        """All wishlists with their products."""
        return (
            self.session.query(Wishlist)
            .options(_with_products())
            .order_by(Wishlist.name.asc())
            .all()
        )

    def get_by_name(self, name: str) -> Wishlist | None:
        """The wishlist with its products, or None."""
        return (
            self.session.query(Wishlist)
            .options(_with_products())
            .filter(Wishlist.name == name)
            .first()
        )

    def create(self, wishlist: Wishlist) -> Wishlist:
        self.session.add(wishlist)
        self.session.commit()
        return wishlist

    def add_product(self, wishlist: Wishlist, product: Product) -> WishlistProduct:
        """
        Append a membership row for ``product``. Callers check
        ``is_product_in_wishlist`` first; the composite primary key rejects
        a duplicate that slips through.
        """
        row = WishlistProduct(
            wishlist_id=wishlist.id,
            product_id=product.id,
            product=product,
        )
        wishlist.wishlist_products.append(row)
        self.session.commit()
        return row

    def remove_product(self, wishlist: Wishlist, product_id: int) -> bool:
        """
        Drop the membership row for ``product_id`` from the loaded collection.
        Returns False without touching the database when the product is not
        in the wishlist.
        """
        row = next(
            (wp for wp in wishlist.wishlist_products if wp.product_id == product_id),
            None,
        )
        if row is None:
            return False

        wishlist.wishlist_products.remove(row)
        self.session.commit()
        return True

    def is_product_in_wishlist(self, wishlist_id: int, product_id: int) -> bool:
        return self.session.query(
            exists().where(
                WishlistProduct.wishlist_id == wishlist_id,
                WishlistProduct.product_id == product_id,
            )
        ).scalar()

    def delete_by_name(self, name: str) -> None:
        """Delete the wishlist and its membership rows; NotFoundError if absent."""
        wishlist = (
            self.session.query(Wishlist)
            .options(selectinload(Wishlist.wishlist_products))
            .filter(Wishlist.name == name)
            .first()
        )
        if wishlist is None:
            raise NotFoundError(f"Wishlist {name} not found")

        self.session.delete(wishlist)
        self.session.commit()
