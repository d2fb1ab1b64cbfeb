from __future__ import annotations

from sqlalchemy.orm import Session

from tripdesk.core.entities.reservation import Reservation as CoreReservation
from tripdesk.core.use_cases.create_reservation import CreateReservationUseCase
from tripdesk.core.use_cases.delete_reservation import DeleteReservationUseCase
from tripdesk.core.use_cases.get_reservation import GetReservationUseCase
from tripdesk.core.use_cases.list_reservations import ListReservationsUseCase
from tripdesk.core.use_cases.update_reservation import UpdateReservationUseCase
from tripdesk.infrastructure.config import settings
from tripdesk.infrastructure.repositories.reservation_repository_impl import ReservationRepositoryImpl
from tripdesk.schemas.models import Reservation, ReservationPayload


def _strict() -> bool:
    return settings.strict_validation


def _to_core_reservation(body: ReservationPayload) -> CoreReservation:
    """
    Translate API schema payload -> core Reservation entity (without id).
    """
    return CoreReservation(
        member_name=body.member_name,
        destination=body.destination,
        start_date=body.start_date,
        end_date=body.end_date,
        status=body.status,
    )


def _to_schema(reservation: CoreReservation) -> Reservation:
    return Reservation(
        id=reservation.id,
        member_name=reservation.member_name,
        destination=reservation.destination,
        start_date=reservation.start_date,
        end_date=reservation.end_date,
        status=reservation.status,
    )


def list_reservations_service(db: Session) -> list[Reservation]:
    use_case = ListReservationsUseCase(reservation_repo=ReservationRepositoryImpl(db))
    return [_to_schema(r) for r in use_case.execute()]


def get_reservation_service(reservation_id: int, db: Session) -> Reservation:
    use_case = GetReservationUseCase(reservation_repo=ReservationRepositoryImpl(db))
    return _to_schema(use_case.execute(reservation_id=reservation_id))


def create_reservation_service(body: ReservationPayload, db: Session) -> Reservation:
    use_case = CreateReservationUseCase(reservation_repo=ReservationRepositoryImpl(db), strict=_strict())
    return _to_schema(use_case.execute(_to_core_reservation(body)))


def update_reservation_service(reservation_id: int, body: ReservationPayload, db: Session) -> None:
    use_case = UpdateReservationUseCase(reservation_repo=ReservationRepositoryImpl(db), strict=_strict())
    use_case.execute(reservation_id=reservation_id, replacement=_to_core_reservation(body))


def delete_reservation_service(reservation_id: int, db: Session) -> None:
    use_case = DeleteReservationUseCase(reservation_repo=ReservationRepositoryImpl(db))
    use_case.execute(reservation_id=reservation_id)
