from storeapi.extensions import db


class Product(db.Model):
    __tablename__ = "product"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(150), unique=True, nullable=False)
    description = db.Column(db.Text, nullable=True)
    price = db.Column(db.Numeric(10, 2), nullable=False, default=0)

    # FK to the owning category
    category_id = db.Column(db.Integer, db.ForeignKey("category.id"), nullable=False)
    category = db.relationship("Category", back_populates="products")

    # Membership rows go away together with the product
    wishlist_products = db.relationship(
        "WishlistProduct",
        back_populates="product",
        lazy=True,
        cascade="all, delete",
    )

    def __repr__(self) -> str:
        return f"<Product {self.name}>"
