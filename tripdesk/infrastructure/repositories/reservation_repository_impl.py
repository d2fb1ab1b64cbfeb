from __future__ import annotations

from collections.abc import Callable
from functools import wraps
from typing import Any, TypeVar

from loguru import logger
from sqlalchemy import select
from sqlalchemy.exc import InterfaceError, OperationalError
from sqlalchemy.orm import Session

from tripdesk.core.entities.reservation import Reservation
from tripdesk.core.exceptions import StorageUnavailableError
from tripdesk.core.repositories.reservation_repository import ReservationRepository
from tripdesk.infrastructure.models.models import ReservationModel

T = TypeVar("T")


def _storage_call(func: Callable[..., T]) -> Callable[..., T]:
    """Translate connection-level SQLAlchemy failures into StorageUnavailableError."""

    @wraps(func)
    def wrapper(self: ReservationRepositoryImpl, *args: Any, **kwargs: Any) -> T:
        try:
            return func(self, *args, **kwargs)
        except (OperationalError, InterfaceError) as e:
            logger.exception(f"Storage failure in {func.__name__}")
            raise StorageUnavailableError() from e

    return wrapper


def _to_entity(row: ReservationModel) -> Reservation:
    return Reservation(
        id=row.id,
        member_name=row.member_name,
        destination=row.destination,
        start_date=row.start_date,
        end_date=row.end_date,
        status=row.status,
    )


class ReservationRepositoryImpl(ReservationRepository):
    def __init__(self, db: Session):
        self.db = db

    @_storage_call
    def list(self) -> list[Reservation]:
        rows = self.db.scalars(select(ReservationModel).order_by(ReservationModel.id)).all()
        return [_to_entity(row) for row in rows]

    @_storage_call
    def get(self, reservation_id: int) -> Reservation | None:
        row = self.db.get(ReservationModel, reservation_id)
        if row is None:
            return None
        return _to_entity(row)

    @_storage_call
    def add(self, reservation: Reservation) -> Reservation:
        row = ReservationModel(
            member_name=reservation.member_name,
            destination=reservation.destination,
            start_date=reservation.start_date,
            end_date=reservation.end_date,
            status=reservation.status,
        )
        self.db.add(row)
        self.db.commit()
        self.db.refresh(row)
        return _to_entity(row)

    @_storage_call
    def update(self, reservation: Reservation) -> None:
        row = self.db.get(ReservationModel, reservation.id)
        if row is None:
            return

        row.member_name = reservation.member_name
        row.destination = reservation.destination
        row.start_date = reservation.start_date
        row.end_date = reservation.end_date
        row.status = reservation.status

        self.db.commit()

    @_storage_call
    def delete(self, reservation_id: int) -> None:
        row = self.db.get(ReservationModel, reservation_id)
        if row is None:
            return

        self.db.delete(row)
        self.db.commit()
