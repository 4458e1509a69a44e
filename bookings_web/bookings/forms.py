from typing import Dict, Mapping, Optional

from bookings_web.models.booking import BOOKING_FIELDS

SUCCESS_MESSAGE = 'Booking created successfully!'


class BookingForm:
    """
    State of the booking creation form for a single render

    Holds the uncommitted field values plus the outcome of the last
    submission attempt. ``success`` and ``error`` are never both set.
    """

    def __init__(self, data: Optional[Mapping[str, str]] = None):
        data = data or {}
        self.data: Dict[str, str] = {name: data.get(name, '') for name in BOOKING_FIELDS}
        self.success: Optional[str] = None
        self.error: Optional[str] = None

    def begin_submit(self):
        self.success = None
        self.error = None

    def payload(self) -> Dict[str, str]:
        return dict(self.data)

    def mark_success(self, message: str = SUCCESS_MESSAGE):
        self.error = None
        self.success = message

    def mark_error(self, message: str):
        self.success = None
        self.error = message
