# storeapi/repositories/__init__.py
from .category_repository import CategoryRepository
from .product_repository import ProductRepository
from .wishlist_repository import WishlistRepository

__all__ = [
    "CategoryRepository",
    "ProductRepository",
    "WishlistRepository",
]
