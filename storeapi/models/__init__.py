# storeapi/models/__init__.py
from .category import Category
from .product import Product
from .wishlist import Wishlist
from .wishlist_product import WishlistProduct

__all__ = [
    "Category",
    "Product",
    "Wishlist",
    "WishlistProduct",
]
