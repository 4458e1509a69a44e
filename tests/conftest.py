import pytest
from unittest.mock import MagicMock

from bookings_web import create_app
from bookings_web.services.booking_api import BookingAPIClient
from config import Config

class TestConfig(Config):
    TESTING = True
    SECRET_KEY = 'test-secret'
    BOOKING_API_URL = 'http://booking-api.test'
    BOOKING_API_TIMEOUT = 5
    UI_THEME = 'pink'

@pytest.fixture
def config_class():
    return TestConfig

@pytest.fixture
def app(config_class):
    app = create_app(config_class)
    yield app

@pytest.fixture
def client(app):
    return app.test_client()

@pytest.fixture
def api(app):
    """Replace the app's booking API client with a mock"""
    mock_api = MagicMock(spec=BookingAPIClient)
    mock_api.list_bookings.return_value = []
    app.extensions['booking_api'] = mock_api
    return mock_api
