from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum


class ReservationStatus(str, Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"


@dataclass(slots=True)
class Reservation:
    member_name: str
    destination: str
    start_date: date
    end_date: date
    status: str = ReservationStatus.PENDING.value
    id: int | None = None

    def replace_with(self, other: Reservation) -> None:
        """
        Full-field overwrite; the id is never touched.
        """
        self.member_name = other.member_name
        self.destination = other.destination
        self.start_date = other.start_date
        self.end_date = other.end_date
        self.status = other.status
