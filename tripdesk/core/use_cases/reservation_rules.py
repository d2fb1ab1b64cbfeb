from __future__ import annotations

from tripdesk.core.entities.reservation import Reservation, ReservationStatus
from tripdesk.core.exceptions import ValidationError

ALLOWED_STATUSES = frozenset(s.value for s in ReservationStatus)


def check_reservation(reservation: Reservation) -> None:
    """
    Strict-mode checks: status must be a known value and the stay must not end before it starts.
    """
    if reservation.status not in ALLOWED_STATUSES:
        raise ValidationError(f"Unknown status: {reservation.status}")
    if reservation.end_date < reservation.start_date:
        raise ValidationError("endDate must not be earlier than startDate")
