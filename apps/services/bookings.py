# apps/services/bookings.py

import logging
from dataclasses import dataclass, asdict

from apps.utils import api
from apps.utils.api import get_api_client
from apps.utils.formatting import format_to_12hr, format_to_readable_date

logger = logging.getLogger(__name__)


@dataclass
class Booking:
    """
    A registration for an event as the dashboard shows it.

    Attributes:
        id: Backend primary key, stringified
        sno: Ticket serial number printed on the QR code
        event_id: Backend id of the booked event
        event_name: Title of the booked event
        event_date: Readable event date, e.g. "June 5, 2025"
        event_time: Readable event start time, e.g. "7:30 PM"
        user_name: Attendee name
        email: Attendee email
        qr_code_url: Absolute or media-relative URL of the QR image
        is_activated: Whether the ticket has been scanned in
    """

    id: str
    sno: str
    event_id: str
    event_name: str
    event_date: str
    event_time: str
    user_name: str
    email: str
    qr_code_url: str = ''
    is_activated: bool = False
    selected_package: dict = None

    @classmethod
    def from_api(cls, data, event=None):
        """
        Normalise a booking payload.

        Args:
            data: Booking dict as returned by the backend
            event: Optional event dict; supplies name and date when the
                payload itself lacks them (e.g. right after registering)
        """
        event = event or {}
        event_date = data.get('event_date') or event.get('date')
        return cls(
            id=str(data['id']),
            sno=data.get('sno') or f"EVENT-{data['id']}",
            event_id=str(data.get('event') or event.get('id') or ''),
            event_name=data.get('event_name') or event.get('title') or 'Unknown Event',
            event_date=format_to_readable_date(event_date),
            event_time=format_to_12hr(event_date),
            user_name=data.get('user_name', ''),
            email=data.get('email', ''),
            qr_code_url=data.get('qr_code_url') or '',
            is_activated=bool(data.get('is_activated', False)),
            selected_package=data.get('selected_package') or None,
        )

    def to_dict(self):
        return asdict(self)


def registration_payload(registration):
    """Map dashboard form fields onto the backend's snake_case registration body."""
    return {
        'user_name': registration['user_name'],
        'email': registration['email'],
        'phone': registration.get('phone') or '',
        'member_count': registration.get('member_count') or 1,
        'selected_package': registration.get('selected_package') or {},
        'food_preference': registration.get('food_preference') or '',
        'additional_members': registration.get('additional_members') or [],
        'total_amount': registration.get('total_amount') or 0.00,
    }


def add_booking(registration, event, client=None):
    client = client or get_api_client()
    data = client.post(api.EVENT_REGISTER, body=registration_payload(registration), event_id=event['id'])
    booking = Booking.from_api(data, event=event)
    logger.info(f"Booking {booking.sno} created for event {event['id']}")
    return booking


def get_bookings(client=None):
    client = client or get_api_client()
    return [Booking.from_api(item) for item in client.get(api.BOOKINGS)]


def get_bookings_by_host(host_id, client=None):
    client = client or get_api_client()
    return [Booking.from_api(item) for item in client.get(api.BOOKINGS_BY_HOST, host_id=host_id)]


def get_bookings_by_event(event_id, client=None):
    client = client or get_api_client()
    return [Booking.from_api(item) for item in client.get(api.EVENT_BOOKINGS, event_id=event_id)]


def get_bookings_by_package(event_id, package_id, client=None):
    bookings = get_bookings_by_event(event_id, client=client)
    return [
        booking for booking in bookings
        if str((booking.selected_package or {}).get('id')) == str(package_id)
    ]


def get_booking_by_sno(sno, client=None):
    client = client or get_api_client()
    return Booking.from_api(client.get(api.BOOKING_BY_SNO, sno=sno))


def scan_booking(sno, client=None):
    """Toggle a ticket's activation; the backend wraps the result in ``booking``."""
    client = client or get_api_client()
    data = client.post(api.BOOKING_SCAN, body={}, sno=sno)
    booking = Booking.from_api(data['booking'])
    logger.info(f"Ticket {sno} is now {'active' if booking.is_activated else 'inactive'}")
    return booking
