"""Flask app factory and blueprint registration.

Defines `create_app()` to initialize the Flask app, load configuration,
enable CORS, create the collection stores, and register route blueprints.
"""

from __future__ import annotations

import logging
import os
from typing import Any, Dict, Optional

from dotenv import load_dotenv
from flask import Flask
from flask_cors import CORS

# Load .env before Config reads the environment
load_dotenv()

from stockdesk.config import Config, ensure_data_dirs  # noqa: E402
from stockdesk.routes.alerts import alerts_bp  # noqa: E402
from stockdesk.routes.blog import blog_bp  # noqa: E402
from stockdesk.routes.checklists import checklists_bp  # noqa: E402
from stockdesk.routes.docs import docs_bp  # noqa: E402
from stockdesk.routes.spa import spa_bp  # noqa: E402
from stockdesk.routes.stock import stock_bp  # noqa: E402
from stockdesk.services.store_service import AlertStore, BlogStore, JsonStore  # noqa: E402


def build_stores(data_dir: str, default_author: str) -> Dict[str, JsonStore]:
    files = Config.COLLECTION_FILES
    return {
        "checklists": JsonStore(os.path.join(data_dir, files["checklists"]), "checklists"),
        "alerts": AlertStore(os.path.join(data_dir, files["alerts"]), "alerts"),
        "blog": BlogStore(os.path.join(data_dir, files["blog"]), "blog", default_author=default_author),
    }


def create_app(overrides: Optional[Dict[str, Any]] = None) -> Flask:
    app = Flask(__name__, static_folder=None)
    app.config.from_object(Config)
    if overrides:
        app.config.update(overrides)
    app.json.ensure_ascii = False

    logging.basicConfig(
        level=app.config["LOG_LEVEL"],
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # Collection files start out as empty arrays
    ensure_data_dirs(app.config["DATA_DIR"])
    stores = build_stores(app.config["DATA_DIR"], app.config["DEFAULT_BLOG_AUTHOR"])
    for store in stores.values():
        store.ensure_file()
    app.extensions["stockdesk.stores"] = stores

    CORS(app, resources={r"/*": {"origins": "*"}}, send_wildcard=True)

    # Blueprints; the SPA catch-all goes last
    app.register_blueprint(checklists_bp)
    app.register_blueprint(alerts_bp)
    app.register_blueprint(blog_bp)
    app.register_blueprint(stock_bp)
    app.register_blueprint(docs_bp)

    @app.get("/health")
    def health():
        return {"status": "ok"}

    app.register_blueprint(spa_bp)

    return app
