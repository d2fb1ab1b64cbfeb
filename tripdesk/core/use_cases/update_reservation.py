from __future__ import annotations

from loguru import logger

from tripdesk.core.entities.reservation import Reservation
from tripdesk.core.exceptions import NotFoundError
from tripdesk.core.repositories.reservation_repository import ReservationRepository
from tripdesk.core.use_cases.reservation_rules import check_reservation


class UpdateReservationUseCase:
    """
    Full replacement of every editable field. There is no partial update and no
    concurrency check: the last writer wins.
    """

    def __init__(self, *, reservation_repo: ReservationRepository, strict: bool = False) -> None:
        self._reservation_repo = reservation_repo
        self._strict = strict

    def execute(self, *, reservation_id: int, replacement: Reservation) -> None:
        current = self._reservation_repo.get(reservation_id)
        if current is None:
            raise NotFoundError("Reservation not found")

        if self._strict:
            check_reservation(replacement)

        current.replace_with(replacement)
        self._reservation_repo.update(current)
        logger.info(f"Updated reservation {reservation_id}")
