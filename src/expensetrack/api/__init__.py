"""Flask application factory for the expensetrack REST API."""

import logging
from typing import Any, Mapping, Optional

from flask import Flask

from expensetrack.config import DEFAULT_SECRET_KEY, Config
from expensetrack.database.base import Database
from expensetrack.database.factories import create_database
from expensetrack.api.errors import register_error_handlers
from expensetrack.api.gate import login_manager
from expensetrack.api.auth import auth_bp
from expensetrack.api.expenses import expenses_bp
from expensetrack.api.categories import categories_bp
from expensetrack.api.analytics import analytics_bp

logger = logging.getLogger(__name__)

BLUEPRINTS = (auth_bp, expenses_bp, categories_bp, analytics_bp)


def create_app(
    config_overrides: Optional[Mapping[str, Any]] = None,
    db: Optional[Database] = None,
) -> Flask:
    """Create the REST application.

    Args:
        config_overrides: Values replacing those read from the environment
        db: Database to use instead of one built from DATABASE_URL
    """
    app = Flask(__name__)
    app.config.from_object(Config)
    if config_overrides:
        app.config.update(config_overrides)
    app.json.sort_keys = False

    logging.getLogger("expensetrack").setLevel(app.config["LOG_LEVEL"])
    if app.config["SECRET_KEY"] == DEFAULT_SECRET_KEY and not app.testing:
        logger.warning("SECRET_KEY is not set; tokens are signed with the default key")

    if db is None:
        db = create_database(app.config.get("DATABASE_URL"))
        db.connect()
        db.initialize_schema()
    app.extensions["expensetrack"] = {"db": db}

    @app.teardown_appcontext
    def release_session(exc):
        db.disconnect()

    login_manager.init_app(app)
    register_error_handlers(app)

    # Routes are served both at the root and under API_PREFIX
    prefix = (app.config.get("API_PREFIX") or "").rstrip("/")
    for blueprint in BLUEPRINTS:
        app.register_blueprint(blueprint)
        if prefix:
            app.register_blueprint(
                blueprint,
                url_prefix=f"{prefix}{blueprint.url_prefix}",
                name=f"api_{blueprint.name}",
            )

    return app
