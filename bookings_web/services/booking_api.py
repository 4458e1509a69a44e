"""
Booking API Client

Thin client for the remote booking API that owns every booking record.

Endpoints:
- GET  /api/bookings        -> list of bookings
- GET  /api/bookings/{id}   -> single booking
- POST /api/bookings        -> create a booking (201 on success)

Each call issues exactly one HTTP request. There is no retry and no
caching; failures are raised as BookingAPIError subclasses so the views
can decide how to degrade.
"""

import logging
from typing import Any, Dict, List, Optional
from urllib.parse import quote

import requests

from bookings_web.models.booking import Booking, BOOKING_FIELDS


logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10
CREATE_ERROR_MESSAGE = 'Error inserting booking'
NETWORK_ERROR_MESSAGE = 'Network error'


class BookingAPIError(Exception):
    """Base exception for booking API errors"""
    def __init__(self, message: str, status_code: Optional[int] = None,
                 response: Optional[Any] = None):
        self.message = message
        self.status_code = status_code
        self.response = response
        super().__init__(self.message)


class BookingNotFoundError(BookingAPIError):
    """Raised when the requested booking does not exist"""
    pass


class BookingRejectedError(BookingAPIError):
    """Raised when the API refuses to create a booking"""
    pass


class APIConnectionError(BookingAPIError):
    """Raised when the API cannot be reached"""
    pass


class BookingAPIClient:
    """
    Client for the remote booking API

    Args:
        base_url: Scheme and host of the API, e.g. ``http://backend:5000``
        timeout: Per-request timeout in seconds
        session: Optional pre-built requests.Session
    """

    def __init__(self, base_url: str, timeout: float = DEFAULT_TIMEOUT,
                 session: Optional[requests.Session] = None):
        if not base_url:
            raise ValueError("Booking API base URL must not be empty")
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self._session = session or requests.Session()

        logger.info(f"Initialized booking API client for {self.base_url}")

    def _url(self, booking_id: Optional[Any] = None) -> str:
        url = f"{self.base_url}/api/bookings"
        if booking_id is not None:
            url = f"{url}/{quote(str(booking_id), safe='')}"
        return url

    @staticmethod
    def _parse_json(response: requests.Response) -> Any:
        try:
            return response.json() if response.text else None
        except ValueError:
            return None

    def _handle_read_response(self, response: requests.Response) -> Any:
        """
        Validate a read response and return its decoded body

        Raises:
            BookingNotFoundError: On 404
            BookingAPIError: On any other non-success status or an unreadable body
        """
        if response.status_code == 404:
            raise BookingNotFoundError("Booking not found", response.status_code,
                                       self._parse_json(response))
        if not response.ok:
            raise BookingAPIError(
                f"Request failed with status {response.status_code}",
                response.status_code,
                self._parse_json(response)
            )

        try:
            return response.json()
        except ValueError:
            raise BookingAPIError("Response body is not valid JSON", response.status_code) from None

    # ==================== READS ====================

    def list_bookings(self) -> List[Booking]:
        """
        Fetch the full booking collection

        Returns:
            List of Booking records in API order

        Raises:
            BookingAPIError: If the request fails or the body is not a list
        """
        url = self._url()
        try:
            response = self._session.get(url, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            raise APIConnectionError(f"{NETWORK_ERROR_MESSAGE}: {str(e)}") from e

        data = self._handle_read_response(response)
        if not isinstance(data, list):
            raise BookingAPIError("Expected a list of bookings", response.status_code, data)

        bookings = []
        for item in data:
            if not isinstance(item, dict):
                continue
            if item.get("id") in (None, ""):
                logger.warning(f"Skipping booking without an id: {item}")
                continue
            bookings.append(Booking.from_dict(item))
        return bookings

    def get_booking(self, booking_id: Any) -> Booking:
        """
        Fetch a single booking by identifier

        Args:
            booking_id: Identifier taken from the route, sent verbatim

        Raises:
            BookingNotFoundError: If the API has no such booking
            BookingAPIError: On any other failure
        """
        url = self._url(booking_id)
        try:
            response = self._session.get(url, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            raise APIConnectionError(f"{NETWORK_ERROR_MESSAGE}: {str(e)}") from e

        data = self._handle_read_response(response)
        if not isinstance(data, dict):
            raise BookingAPIError("Expected a booking object", response.status_code, data)

        return Booking.from_dict(data)

    # ==================== WRITES ====================

    def create_booking(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        """
        Create a booking

        Args:
            payload: Mapping holding the five creatable booking fields

        Returns:
            The decoded 201 response body (the created booking, or at least its id)

        Raises:
            BookingRejectedError: On any status other than 201
            APIConnectionError: If the API cannot be reached
        """
        body = {name: payload.get(name, '') for name in BOOKING_FIELDS}

        try:
            response = self._session.post(
                self._url(),
                json=body,
                headers={'Content-Type': 'application/json'},
                timeout=self.timeout
            )
        except requests.exceptions.RequestException as e:
            logger.warning(f"Create booking network error: {str(e)}")
            raise APIConnectionError(NETWORK_ERROR_MESSAGE) from e

        data = self._parse_json(response)

        if response.status_code == 201:
            return data if isinstance(data, dict) else {}

        message = None
        if isinstance(data, dict):
            message = data.get('message')
        logger.warning(f"Create booking rejected with status {response.status_code}: {message}")
        raise BookingRejectedError(message or CREATE_ERROR_MESSAGE, response.status_code, data)

