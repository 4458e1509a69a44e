from dataclasses import dataclass, fields
from typing import Any, Dict, Union

# Fields a client supplies when creating a booking; `id` is assigned by the API.
BOOKING_FIELDS = ('service', 'doctor_name', 'start_time', 'end_time', 'date')


@dataclass(frozen=True)
class Booking:
    """A booking as returned by the remote API. Read-only on this side."""
    id: Union[int, str, None] = None
    service: str = ''
    doctor_name: str = ''
    start_time: str = ''
    end_time: str = ''
    date: str = ''

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Booking':
        known = {f.name for f in fields(cls)}
        values = {key: value for key, value in data.items() if key in known}
        for name in BOOKING_FIELDS:
            if values.get(name) is None:
                values[name] = ''
        return cls(**values)

