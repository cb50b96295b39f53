from storeapi.extensions import db


class Category(db.Model):
    __tablename__ = "category"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(100), unique=True, nullable=False)

    # Products cannot outlive their category
    products = db.relationship(
        "Product",
        back_populates="category",
        lazy=True,
        cascade="all, delete",
    )

    def __repr__(self) -> str:
        return f"<Category {self.name}>"
