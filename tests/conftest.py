from __future__ import annotations

import pytest
from flask.testing import FlaskClient

from interest_calc.app import create_app
from interest_calc.config import Settings


@pytest.fixture()
def client() -> FlaskClient:
    flask_app = create_app(Settings(log_level="WARNING"))
    with flask_app.test_client() as test_client:
        yield test_client
