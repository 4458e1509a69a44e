from bookings_web.models.booking import Booking, BOOKING_FIELDS

__all__ = ['Booking', 'BOOKING_FIELDS']
