from __future__ import annotations

from tripdesk.core.entities.reservation import Reservation
from tripdesk.core.exceptions import NotFoundError
from tripdesk.core.repositories.reservation_repository import ReservationRepository


class GetReservationUseCase:
    def __init__(self, *, reservation_repo: ReservationRepository) -> None:
        self._reservation_repo = reservation_repo

    def execute(self, *, reservation_id: int) -> Reservation:
        reservation: Reservation | None = self._reservation_repo.get(reservation_id)
        if reservation is None:
            raise NotFoundError("Reservation not found")
        return reservation
