# storeapi/models/wishlist_product.py
from storeapi.extensions import db


class WishlistProduct(db.Model):
    """Join row recording that a product belongs to a wishlist."""

    __tablename__ = "wishlist_product"

    wishlist_id = db.Column(db.Integer, db.ForeignKey("wishlist.id"), primary_key=True)
    product_id = db.Column(db.Integer, db.ForeignKey("product.id"), primary_key=True)

    wishlist = db.relationship("Wishlist", back_populates="wishlist_products")
    product = db.relationship("Product", back_populates="wishlist_products")

    def __repr__(self) -> str:  # pragma: no cover - debug aid
        return f"<WishlistProduct wishlist={self.wishlist_id} product={self.product_id}>"
