# storeapi/extensions.py
from flask_sqlalchemy import SQLAlchemy
from flask_migrate import Migrate
from flask_cors import CORS

# Keep extension instances in one place to avoid circular imports
db = SQLAlchemy()
migrate = Migrate()
cors = CORS()


def init_cors(app):
    """Allow the configured front-end origins on the JSON API only."""
    origins = app.config.get("CORS_ORIGINS") or []
    cors.init_app(
        app,
        resources={
            r"/api/*": {
                "origins": origins,
                "supports_credentials": True,
            }
        },
    )
    app.logger.info("CORS enabled for /api/* -> %s", ", ".join(origins) or "(none)")
