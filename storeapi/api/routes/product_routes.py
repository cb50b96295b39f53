from flask import Blueprint, current_app

from storeapi.api.utils.responses import envelope, failed, get_payload, rejected
from storeapi.api.utils.validators import (
    check_id_matches,
    optional_text,
    parse_int,
    parse_price,
    require_name,
)
from storeapi.errors import ConflictError, StoreError, ValidationError
from storeapi.extensions import db
from storeapi.models import Product
from storeapi.repositories import CategoryRepository, ProductRepository

api_products = Blueprint("api_products", __name__, url_prefix="/api/products")


def _product_dict(product: Product) -> dict:
    return {
        "id": product.id,
        "name": product.name,
        "description": product.description,
        "price": float(product.price) if product.price is not None else None,
        "category_id": product.category_id,
    }


# ========================= Endpoints =========================

@api_products.get("")
def get_products():
    try:
        products = ProductRepository(db.session).get_all()
    except Exception as e:
        return failed(e, "getting all products")

    if not products:
        current_app.logger.warning("[PRODUCT] no products found")
        return envelope("No products found", data=[])

    current_app.logger.info("[PRODUCT] retrieved %d products", len(products))
    return envelope("Success", data=[_product_dict(p) for p in products])


@api_products.get("/<int:product_id>")
def get_product(product_id: int):
    try:
        product = ProductRepository(db.session).get_by_id(product_id)
    except StoreError as e:
        return rejected(e)
    except Exception as e:
        return failed(e, "getting product")

    current_app.logger.info("[PRODUCT] retrieved id=%s", product_id)
    return envelope("Success", data=_product_dict(product))


@api_products.post("")
def create_product():
    repo = ProductRepository(db.session)
    try:
        data = get_payload()
        name = require_name(data, "Product")
        price = parse_price(data.get("price"))
        category_id = parse_int(data.get("category_id"), "category_id")

        if repo.get_by_name(name) is not None:
            raise ConflictError(f"Product with name '{name}' already exists.")
        if repo.get_category(category_id) is None:
            raise ValidationError(f"Category with ID {category_id} not found")

        product = repo.create(
            Product(
                name=name,
                description=optional_text(data.get("description")),
                price=price,
                category_id=category_id,
            )
        )
    except StoreError as e:
        return rejected(e)
    except Exception as e:
        return failed(e, "creating the product")

    current_app.logger.info("[PRODUCT] created id=%s name=%r", product.id, product.name)
    return envelope("Product created successfully.", data=_product_dict(product), status=201)


@api_products.put("/<int:product_id>")
def update_product(product_id: int):
    repo = ProductRepository(db.session)
    try:
        data = get_payload()
        check_id_matches(data, product_id, "Product")
        existing = repo.get_by_id(product_id)

        changes = {}
        if "name" in data:
            name = require_name(data, "Product")
            other = repo.get_by_name(name)
            if other is not None and other.id != existing.id:
                raise ConflictError(f"Product with name '{name}' already exists.")
            changes["name"] = name
        if "description" in data:
            changes["description"] = optional_text(data.get("description"))
        if "price" in data:
            changes["price"] = parse_price(data.get("price"))
        if "category_id" in data:
            category_id = parse_int(data.get("category_id"), "category_id")
            if not CategoryRepository(db.session).exists(category_id):
                raise ValidationError(f"Category with ID {category_id} not found")
            changes["category_id"] = category_id

        repo.update(product_id, changes)
    except StoreError as e:
        return rejected(e)
    except Exception as e:
        return failed(e, "updating the product")

    current_app.logger.info("[PRODUCT] updated id=%s fields=%s", product_id, sorted(changes))
    return envelope(f"Product ID {product_id} updated successfully", data=_product_dict(existing))


@api_products.delete("/<int:product_id>")
def delete_product(product_id: int):
    repo = ProductRepository(db.session)
    try:
        repo.get_by_id(product_id)
        repo.delete(product_id)
    except StoreError as e:
        return rejected(e)
    except Exception as e:
        return failed(e, "deleting the product")

    current_app.logger.info("[PRODUCT] deleted id=%s", product_id)
    return envelope(f"Product ID {product_id} deleted successfully.")
