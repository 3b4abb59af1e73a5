from __future__ import annotations

import pytest
from flask.testing import FlaskClient

from fincalc.app import create_app
from fincalc.config import TestConfig


@pytest.fixture()
def app():
    return create_app(TestConfig())


@pytest.fixture()
def client(app) -> FlaskClient:
    with app.test_client() as test_client:
        yield test_client
