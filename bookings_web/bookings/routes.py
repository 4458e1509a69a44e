"""
Booking pages
Listing with creation form, and a single booking detail page
"""
from flask import current_app, flash, get_flashed_messages, redirect, render_template, request, url_for

from bookings_web.bookings import bookings_bp
from bookings_web.bookings.forms import BookingForm
from bookings_web.extensions import booking_api
from bookings_web.services.booking_api import (
    APIConnectionError,
    BookingAPIError,
    BookingNotFoundError,
    BookingRejectedError,
    NETWORK_ERROR_MESSAGE,
)


def _load_bookings():
    """Fetch the booking list, degrading to an empty list on any API failure"""
    try:
        return booking_api.client.list_bookings()
    except BookingAPIError as e:
        current_app.logger.error(f"Failed to fetch bookings: {e.message}")
        return []


def _render_index(form, status_code=200):
    return render_template(
        'bookings/index.html',
        bookings=_load_bookings(),
        form=form
    ), status_code


@bookings_bp.route('/', methods=['GET'])
def index():
    form = BookingForm()
    for message in get_flashed_messages(category_filter=['success']):
        form.mark_success(message)
    return _render_index(form)


@bookings_bp.route('/', methods=['POST'])
def create_booking():
    form = BookingForm(request.form)
    form.begin_submit()

    try:
        booking_api.client.create_booking(form.payload())
    except BookingRejectedError as e:
        form.mark_error(e.message)
        return _render_index(form, 422)
    except APIConnectionError:
        form.mark_error(NETWORK_ERROR_MESSAGE)
        return _render_index(form, 502)

    form.mark_success()
    flash(form.success, 'success')
    # Redirect so the listing read runs again and shows the new booking
    return redirect(url_for('bookings.index'))


@bookings_bp.route('/booking/<booking_id>', methods=['GET'])
def booking_detail(booking_id):
    try:
        booking = booking_api.client.get_booking(booking_id)
    except BookingNotFoundError:
        current_app.logger.warning(f"Booking {booking_id} not found")
        return render_template(
            'bookings/unavailable.html',
            title='Booking not found',
            message='We could not find this booking.'
        ), 404
    except BookingAPIError as e:
        current_app.logger.error(f"Failed to fetch booking {booking_id}: {e.message}")
        return render_template(
            'bookings/unavailable.html',
            title='Booking unavailable',
            message='This booking cannot be shown right now. Please try again later.'
        ), 502

    return render_template('bookings/detail.html', booking=booking)
