import pytest

from signupform.entrypoints.flask_app import create_app


@pytest.fixture
def app():
    """Create test Flask application."""
    app = create_app("testing")
    return app


@pytest.fixture
def client(app):
    """Create test client."""
    return app.test_client()
