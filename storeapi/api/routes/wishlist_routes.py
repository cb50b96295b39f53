from __future__ import annotations

from flask import Blueprint, current_app

from storeapi.api.routes.product_routes import _product_dict
from storeapi.api.utils.responses import envelope, failed, get_payload, rejected
from storeapi.api.utils.validators import require_name
from storeapi.errors import ConflictError, NotFoundError, StoreError
from storeapi.extensions import db
from storeapi.models import Wishlist
from storeapi.repositories import ProductRepository, WishlistRepository

api_wishlists = Blueprint("api_wishlists", __name__, url_prefix="/api/wishlists")


def _wishlist_dict(w: Wishlist) -> dict:
    return {
        "id": w.id,
        "name": w.name,
        "products": [_product_dict(p) for p in w.products],
    }


def _load_wishlist(repo: WishlistRepository, name: str) -> Wishlist:
    wishlist = repo.get_by_name(name)
    if wishlist is None:
        raise NotFoundError(f"Wishlist '{name}' not found.")
    return wishlist


@api_wishlists.get("")
def get_all_wishlists():
    try:
        wishlists = WishlistRepository(db.session).get_all()
    except Exception as e:
        return failed(e, "getting all wishlists")

    if not wishlists:
        current_app.logger.warning("[WISHLIST] no wishlists found")
        return envelope("No wishlists found", data=[])

    current_app.logger.info("[WISHLIST] retrieved %d wishlists", len(wishlists))
    return envelope(
        "Successfully retrieved all wishlists",
        data=[_wishlist_dict(w) for w in wishlists],
    )


@api_wishlists.get("/<string:name>")
def get_wishlist_by_name(name: str):
    try:
        wishlist = _load_wishlist(WishlistRepository(db.session), name)
    except StoreError as e:
        return rejected(e)
    except Exception as e:
        return failed(e, "getting the wishlist")

    current_app.logger.info("[WISHLIST] retrieved %r", name)
    return envelope("Successfully retrieved the wishlist", data=_wishlist_dict(wishlist))


@api_wishlists.post("")
def create_wishlist():
    repo = WishlistRepository(db.session)
    try:
        name = require_name(get_payload(), "Wishlist")
        if repo.get_by_name(name) is not None:
            raise ConflictError("Wishlist with this name already exists.")
        wishlist = repo.create(Wishlist(name=name))
    except StoreError as e:
        return rejected(e)
    except Exception as e:
        return failed(e, "creating the wishlist")

    current_app.logger.info("[WISHLIST] created id=%s name=%r", wishlist.id, wishlist.name)
    return envelope("Wishlist created successfully.", data=_wishlist_dict(wishlist), status=201)


@api_wishlists.post("/<string:name>/products/<int:product_id>")
def add_product_to_wishlist(name: str, product_id: int):
    repo = WishlistRepository(db.session)
    try:
        wishlist = _load_wishlist(repo, name)
        product = ProductRepository(db.session).get_by_id(product_id)

        if repo.is_product_in_wishlist(wishlist.id, product.id):
            raise ConflictError("Product is already in the wishlist.")

        repo.add_product(wishlist, product)
    except StoreError as e:
        return rejected(e)
    except Exception as e:
        return failed(e, "adding product to wishlist")

    current_app.logger.info("[WISHLIST] %r += product %s", name, product_id)
    return envelope(
        "Product added to wishlist successfully.",
        data=_wishlist_dict(wishlist),
        status=201,
    )


@api_wishlists.delete("/<string:name>/products/<int:product_id>")
def remove_product_from_wishlist(name: str, product_id: int):
    repo = WishlistRepository(db.session)
    try:
        wishlist = _load_wishlist(repo, name)
        removed = repo.remove_product(wishlist, product_id)
    except StoreError as e:
        return rejected(e)
    except Exception as e:
        return failed(e, "removing product from wishlist")

    if removed:
        current_app.logger.info("[WISHLIST] %r -= product %s", name, product_id)
    else:
        current_app.logger.info("[WISHLIST] product %s not in %r, nothing to remove", product_id, name)
    return envelope("Product removed from wishlist successfully.", data=_wishlist_dict(wishlist))


@api_wishlists.delete("/<string:name>")
def delete_wishlist(name: str):
    try:
        WishlistRepository(db.session).delete_by_name(name)
    except StoreError as e:
        return rejected(e)
    except Exception as e:
        return failed(e, "deleting the wishlist")

    current_app.logger.info("[WISHLIST] deleted %r", name)
    return envelope("Wishlist deleted successfully.")
