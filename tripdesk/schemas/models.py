from __future__ import annotations

from datetime import date

from pydantic import BaseModel, ConfigDict, Field


class ReservationPayload(BaseModel):
    """
    Request body for create and full-replacement update. An `id` in the body is ignored.
    """
    model_config = ConfigDict(populate_by_name=True)

    member_name: str = Field(alias="memberName", min_length=1)
    destination: str = Field(min_length=1)
    start_date: date = Field(alias="startDate")
    end_date: date = Field(alias="endDate")
    status: str = "pending"


class Reservation(ReservationPayload):
    id: int
