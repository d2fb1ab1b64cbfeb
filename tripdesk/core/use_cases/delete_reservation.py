from __future__ import annotations

from loguru import logger

from tripdesk.core.exceptions import NotFoundError
from tripdesk.core.repositories.reservation_repository import ReservationRepository


class DeleteReservationUseCase:
    def __init__(self, *, reservation_repo: ReservationRepository) -> None:
        self._reservation_repo = reservation_repo

    def execute(self, *, reservation_id: int) -> None:
        if self._reservation_repo.get(reservation_id) is None:
            raise NotFoundError("Reservation not found")

        self._reservation_repo.delete(reservation_id)
        logger.info(f"Deleted reservation {reservation_id}")
