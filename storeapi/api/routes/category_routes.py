from __future__ import annotations

from flask import Blueprint, current_app

from storeapi.api.routes.product_routes import _product_dict
from storeapi.api.utils.responses import envelope, failed, get_payload, rejected
from storeapi.api.utils.validators import check_id_matches, require_name
from storeapi.errors import ConflictError, StoreError
from storeapi.extensions import db
from storeapi.models import Category
from storeapi.repositories import CategoryRepository

api_categories = Blueprint("api_categories", __name__, url_prefix="/api/categories")


def _cat_to_dict(c: Category, with_products: bool = False) -> dict:
    data = {
        "id": c.id,
        "name": c.name,
    }
    if with_products:
        data["products"] = [_product_dict(p) for p in c.products]
    return data


@api_categories.get("")
def list_categories():
    try:
        categories = CategoryRepository(db.session).get_all()
    except Exception as e:
        return failed(e, "getting all categories")

    if not categories:
        current_app.logger.warning("[CATEGORY] no categories found")
        return envelope("No Categories found", data=[])

    current_app.logger.info("[CATEGORY] retrieved %d categories", len(categories))
    return envelope("Success GET LIST", data=[_cat_to_dict(c) for c in categories])


@api_categories.get("/<int:category_id>")
def get_category(category_id: int):
    try:
        category = CategoryRepository(db.session).get_by_id(category_id)
    except StoreError as e:
        return rejected(e)
    except Exception as e:
        return failed(e, "getting the category")

    current_app.logger.info("[CATEGORY] retrieved id=%s", category_id)
    return envelope("Success", data=_cat_to_dict(category, with_products=True))


@api_categories.post("")
def create_category():
    repo = CategoryRepository(db.session)
    try:
        name = require_name(get_payload(), "Category")
        if repo.get_by_name(name) is not None:
            raise ConflictError(f"Category with name '{name}' already exists.")
        category = repo.create(Category(name=name))
    except StoreError as e:
        return rejected(e)
    except Exception as e:
        return failed(e, "creating the category")

    current_app.logger.info("[CATEGORY] created id=%s name=%r", category.id, category.name)
    return envelope("Category created successfully.", data=_cat_to_dict(category), status=201)


@api_categories.put("/<int:category_id>")
def update_category(category_id: int):
    repo = CategoryRepository(db.session)
    try:
        data = get_payload()
        check_id_matches(data, category_id, "Category")
        existing = repo.get_by_id(category_id)

        changes = {}
        if "name" in data:
            name = require_name(data, "Category")
            other = repo.get_by_name(name)
            if other is not None and other.id != existing.id:
                raise ConflictError(f"Category with name '{name}' already exists.")
            changes["name"] = name

        repo.update(category_id, changes)
    except StoreError as e:
        return rejected(e)
    except Exception as e:
        return failed(e, "updating the category")

    current_app.logger.info("[CATEGORY] updated id=%s", category_id)
    return envelope(f"Category ID {category_id} updated successfully", data=_cat_to_dict(existing))


@api_categories.delete("/<int:category_id>")
def delete_category(category_id: int):
    repo = CategoryRepository(db.session)
    try:
        repo.get_by_id(category_id)
        repo.delete(category_id)
    except StoreError as e:
        return rejected(e)
    except Exception as e:
        return failed(e, "deleting the category")

    current_app.logger.info("[CATEGORY] deleted id=%s", category_id)
    return envelope(f"Category ID {category_id} deleted successfully.")
