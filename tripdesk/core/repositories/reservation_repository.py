from __future__ import annotations

from abc import ABC, abstractmethod

from tripdesk.core.entities.reservation import Reservation


class ReservationRepository(ABC):
    @abstractmethod
    def list(self) -> list[Reservation]:
        """All reservations in storage-native order."""
        raise NotImplementedError

    @abstractmethod
    def get(self, reservation_id: int) -> Reservation | None:
        raise NotImplementedError

    @abstractmethod
    def add(self, reservation: Reservation) -> Reservation:
        """Persist a new row and return it with the id assigned by storage."""
        raise NotImplementedError

    @abstractmethod
    def update(self, reservation: Reservation) -> None:
        raise NotImplementedError

    @abstractmethod
    def delete(self, reservation_id: int) -> None:
        raise NotImplementedError
