"""Application factory and app-wide configuration."""

import logging
from typing import Optional

from flask import Flask
from flask_cors import CORS

from fundcompare.app.api.routes import api_bp
from fundcompare.config import Config

LOG_FORMAT = "%(asctime)s %(name)s [%(levelname)s] %(message)s"


def create_app(config_object: Optional[object] = None) -> Flask:
    """Build the Flask app instance."""
    app = Flask(__name__)
    app.config.from_object(Config)
    if config_object is not None:
        app.config.from_object(config_object)
    app.config.from_prefixed_env("FUNDCOMPARE")

    logging.basicConfig(level=app.config["LOG_LEVEL"], format=LOG_FORMAT, datefmt="%H:%M:%S")
    logging.getLogger("fundcompare").setLevel(app.config["LOG_LEVEL"])

    app.json.sort_keys = False

    CORS(
        app,
        resources={r"/api/*": {"origins": app.config["CORS_ORIGINS"]}},
        supports_credentials=True,
    )

    app.register_blueprint(api_bp, url_prefix="/api")
    return app
