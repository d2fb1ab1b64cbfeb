from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Request, Response
from sqlalchemy.orm import Session

from tripdesk.core.exceptions import NotFoundError, ValidationError
from tripdesk.infrastructure.database import SessionLocal
from tripdesk.services.reservation_service import (
    create_reservation_service,
    delete_reservation_service,
    get_reservation_service,
    list_reservations_service,
    update_reservation_service,
)
from tripdesk.schemas.models import Reservation, ReservationPayload

router = APIRouter(prefix="/api/reservations")


def get_db() -> Session:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@router.get("", response_model=list[Reservation])
def get_api_reservations(db: Session = Depends(get_db)) -> list[Reservation]:
    """
    List all reservations
    """
    return list_reservations_service(db)


@router.get("/{reservation_id}", response_model=Reservation)
def get_api_reservations_reservation_id(reservation_id: int, db: Session = Depends(get_db)) -> Reservation:
    """
    Get a reservation by id
    """
    try:
        return get_reservation_service(reservation_id, db)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("", response_model=Reservation, status_code=201)
def post_api_reservations(
    body: ReservationPayload,
    request: Request,
    response: Response,
    db: Session = Depends(get_db),
) -> Reservation:
    """
    Create a reservation

    Returns:
      - 201 with the stored reservation and a Location header pointing at it
      - 422 on validation error
    """
    try:
        created = create_reservation_service(body, db)
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=str(e))

    response.headers["Location"] = str(
        request.url_for("get_api_reservations_reservation_id", reservation_id=created.id)
    )
    return created


@router.put("/{reservation_id}", status_code=204, response_class=Response)
def put_api_reservations_reservation_id(
    reservation_id: int,
    body: ReservationPayload,
    db: Session = Depends(get_db),
) -> Response:
    """
    Replace every field of a reservation

    Returns:
      - 204 on success
      - 404 if the reservation does not exist
      - 422 on validation error
    """
    try:
        update_reservation_service(reservation_id, body, db)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return Response(status_code=204)


@router.delete("/{reservation_id}", status_code=204, response_class=Response)
def delete_api_reservations_reservation_id(reservation_id: int, db: Session = Depends(get_db)) -> Response:
    """
    Delete a reservation
    """
    try:
        delete_reservation_service(reservation_id, db)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return Response(status_code=204)
