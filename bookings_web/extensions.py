from flask import current_app

from bookings_web.services.booking_api import BookingAPIClient


class BookingAPI:
    """Flask extension that owns the booking API client for an app"""

    def init_app(self, app):
        app.extensions['booking_api'] = BookingAPIClient(
            base_url=app.config['BOOKING_API_URL'],
            timeout=app.config['BOOKING_API_TIMEOUT']
        )

    @property
    def client(self) -> BookingAPIClient:
        return current_app.extensions['booking_api']


booking_api = BookingAPI()
