"""Application factory and app-wide configuration."""

from typing import Optional

from flask import Flask
from flask_cors import CORS

from fincalc.app.api.routes import api_bp
from fincalc.config import BaseConfig, DevConfig
from fincalc.logging_config import setup_logging


def create_app(config: Optional[BaseConfig] = None) -> Flask:
    """Build the Flask app instance."""
    config = config or DevConfig()
    setup_logging(config)

    app = Flask(__name__)
    app.config.from_object(config)

    CORS(
        app,
        resources={r"/api/*": {"origins": config.CORS_ORIGINS}},
        supports_credentials=True,
    )

    app.register_blueprint(api_bp, url_prefix="/api")
    return app
