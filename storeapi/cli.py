# storeapi/cli.py
from decimal import Decimal

import click
from flask import Flask

from storeapi.extensions import db
from storeapi.models import Category, Product, Wishlist, WishlistProduct

# name -> [(product, description, price)]
DEMO_CATALOG = {
    "Books": [
        ("The Pragmatic Programmer", "20th anniversary edition", Decimal("39.90")),
        ("Clean Architecture", None, Decimal("32.50")),
    ],
    "Games": [
        ("Chess Set", "Wooden, folding board", Decimal("24.00")),
    ],
}
DEMO_WISHLIST = ("Birthday", ["Clean Architecture", "Chess Set"])


def seed_demo_catalog() -> dict:
    """
    Insert the demo categories, products and wishlist, skipping anything whose
    name already exists. Returns how many rows of each kind were created.
    """
    created = {"categories": 0, "products": 0, "wishlists": 0, "memberships": 0}

    for cat_name, products in DEMO_CATALOG.items():
        category = Category.query.filter_by(name=cat_name).first()
        if category is None:
            category = Category(name=cat_name)
            db.session.add(category)
            db.session.flush()  # need category.id for the products
            created["categories"] += 1

        for name, description, price in products:
            if Product.query.filter_by(name=name).first() is None:
                db.session.add(
                    Product(name=name, description=description, price=price, category_id=category.id)
                )
                created["products"] += 1
    db.session.flush()

    wishlist_name, product_names = DEMO_WISHLIST
    wishlist = Wishlist.query.filter_by(name=wishlist_name).first()
    if wishlist is None:
        wishlist = Wishlist(name=wishlist_name)
        db.session.add(wishlist)
        db.session.flush()
        created["wishlists"] += 1

    member_ids = {wp.product_id for wp in wishlist.wishlist_products}
    for name in product_names:
        product = Product.query.filter_by(name=name).first()
        if product is not None and product.id not in member_ids:
            wishlist.wishlist_products.append(WishlistProduct(product=product))
            created["memberships"] += 1

    db.session.commit()
    return created


def register_commands(app: Flask) -> None:
    @app.cli.command("init-db")
    @click.option("--drop", is_flag=True, default=False, help="Drop all tables first")
    def init_db(drop: bool):
        """Create the database tables."""
        if drop:
            db.drop_all()
            click.echo("[OK] Dropped all tables.")
        db.create_all()
        click.echo(f"[DONE] Tables ready at {db.engine.url}")

    @app.cli.command("seed")
    def seed():
        """Insert a small demo catalog (idempotent)."""
        db.create_all()  # in case the database is still empty
        created = seed_demo_catalog()
        click.echo(
            "[OK] Seeded {categories} categories, {products} products, "
            "{wishlists} wishlists, {memberships} memberships".format(**created)
        )
