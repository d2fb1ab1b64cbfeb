from __future__ import annotations

import pytest
from sqlalchemy import delete

from tripdesk.infrastructure.database import SessionLocal
from tripdesk.infrastructure.models.models import ReservationModel


@pytest.fixture(autouse=True)
def _clear_reservations_before_each_test() -> None:
    """
    Tests share one in-memory SQLite database; start every test from an empty table.
    """
    from tripdesk.main import app  # noqa: F401  creates the tables

    db = SessionLocal()
    try:
        db.execute(delete(ReservationModel))
        db.commit()
    finally:
        db.close()
