from __future__ import annotations

from loguru import logger

from tripdesk.core.entities.reservation import Reservation
from tripdesk.core.repositories.reservation_repository import ReservationRepository
from tripdesk.core.use_cases.reservation_rules import check_reservation


class CreateReservationUseCase:
    """
    Stores a new reservation. Any id on the incoming reservation is discarded;
    storage assigns a fresh one.
    """

    def __init__(self, *, reservation_repo: ReservationRepository, strict: bool = False) -> None:
        self._reservation_repo = reservation_repo
        self._strict = strict

    def execute(self, reservation: Reservation) -> Reservation:
        if self._strict:
            check_reservation(reservation)

        reservation.id = None
        created = self._reservation_repo.add(reservation)
        logger.info(f"Created reservation {created.id} for {created.member_name}")
        return created
