import logging
from flask import Flask
from .config import config_by_name
from .extensions import db, migrate, jwt
from . import models  # noqa: F401  (registers every table on db.metadata)
from .api.docs import register_api_docs
from .api.v1 import v1_bp
from .errors import register_error_handlers
from .composition import default_registry


def create_app(config_name: str = "development", overrides: dict | None = None) -> Flask:
    app = Flask(__name__)
    app.config.from_object(config_by_name[config_name])
    if overrides:
        app.config.update(overrides)

    # -------------------------------------------------
    # Logging
    # -------------------------------------------------
    logging.getLogger("pagecraft").setLevel(app.config["LOG_LEVEL"])
    app.logger.setLevel(app.config["LOG_LEVEL"])

    # -------------------------------------------------
    # Extensions
    # -------------------------------------------------
    db.init_app(app)
    migrate.init_app(app, db)
    jwt.init_app(app)

    # -------------------------------------------------
    # Blueprints, error handlers, API docs
    # -------------------------------------------------
    app.register_blueprint(v1_bp, url_prefix="/api/v1")
    register_error_handlers(app)
    register_api_docs(app)

    app.logger.info(
        "create_app(%s) complete; section types: %s; compose workers: %s",
        config_name,
        ", ".join(default_registry),
        app.config["COMPOSE_MAX_WORKERS"],
    )
    return app
