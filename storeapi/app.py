# storeapi/app.py
import logging

from flask import Flask
from werkzeug.exceptions import HTTPException

from storeapi.config import Config

# Extensions
from storeapi.extensions import db, migrate, init_cors

# Blueprints
from storeapi.api.routes.category_routes import api_categories
from storeapi.api.routes.product_routes import api_products
from storeapi.api.routes.wishlist_routes import api_wishlists
from storeapi.api.utils.responses import envelope
from storeapi.cli import register_commands
from storeapi import models as _models  # noqa: F401


def _configure_logging(level_name: str) -> None:
    level = getattr(logging, str(level_name).upper(), logging.INFO)
    # Show INFO logs even outside the werkzeug access log
    logging.basicConfig(level=level)
    logging.getLogger().setLevel(level)


def create_app(config_object=None) -> Flask:
    app = Flask(__name__)
    app.config.from_object(config_object or Config)
    app.json.sort_keys = False

    _configure_logging(app.config.get("LOG_LEVEL", "INFO"))

    # Init extensions
    db.init_app(app)
    migrate.init_app(app, db)
    init_cors(app)

    # Register blueprints
    app.register_blueprint(api_categories)
    app.register_blueprint(api_products)
    app.register_blueprint(api_wishlists)

    @app.errorhandler(HTTPException)
    def _http_error(e: HTTPException):
        # Routing errors and malformed requests use the same JSON envelope as the API
        return envelope(e.name, error=e.description, status=e.code)

    @app.get("/health")
    def health():
        return envelope("ok")

    register_commands(app)
    return app
