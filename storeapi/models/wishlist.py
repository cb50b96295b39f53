from storeapi.extensions import db


class Wishlist(db.Model):
    __tablename__ = "wishlist"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(100), unique=True, nullable=False)

    # Removing a row from this collection deletes it from the join table
    wishlist_products = db.relationship(
        "WishlistProduct",
        back_populates="wishlist",
        lazy=True,
        cascade="all, delete-orphan",
    )

    @property
    def products(self) -> list:
        """Products currently in the wishlist, in insertion order of the join rows."""
        return [wp.product for wp in self.wishlist_products if wp.product is not None]

    def __repr__(self) -> str:
        return f"<Wishlist {self.name}>"
