"""Application factory and app-wide configuration."""

#setup: python -m venv .venv
#setup: source .venv/bin/activate   # (windows: .venv\Scripts\activate)
#setup: pip install -U pip -e ".[test]"
#setup: flask --app interest_calc.app run --port 5000 --debug

from __future__ import annotations

import logging
from typing import Optional

from flask import Flask
from flask_cors import CORS

from interest_calc.app.api.routes import api_bp
from interest_calc.config import Settings, load_settings

LOG_FORMAT = "%(asctime)s - [%(levelname)s] - %(message)s"


def create_app(settings: Optional[Settings] = None) -> Flask:
    """Build the Flask app instance."""
    settings = settings or load_settings()
    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)

    app = Flask(__name__)
    app.extensions["interest_calc.settings"] = settings

    CORS(
        app,
        resources={r"/api/*": {"origins": settings.allowed_origins}},
        supports_credentials=True,
        allow_headers=["Content-Type", "Authorization"],
        methods=["GET", "POST", "OPTIONS"],
    )

    app.register_blueprint(api_bp, url_prefix="/api")
    return app
