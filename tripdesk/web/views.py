from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates
from pydantic import ValidationError as SchemaValidationError

from tripdesk.core.entities.reservation import ReservationStatus
from tripdesk.infrastructure.config import settings
from tripdesk.schemas.models import ReservationPayload
from tripdesk.web.api_client import NetworkFailure, ReservationApiClient, ReservationNotFound

templates = Jinja2Templates(directory=Path(__file__).resolve().parent / "templates")

router = APIRouter(include_in_schema=False)

STATUS_CHOICES = [(s.value, s.value.capitalize()) for s in ReservationStatus]
REQUIRED_FIELDS = ("memberName", "destination", "startDate", "endDate")

CREATE_FAILED = "Failed to create reservation. Please try again."
UPDATE_FAILED = "Failed to update reservation. Please try again."
DELETE_FAILED = "Failed to delete reservation"
MISSING_FIELDS = "Please fill in all required fields."


def get_api_client() -> Iterator[ReservationApiClient]:
    client = ReservationApiClient(settings.api_base_url, timeout=settings.http_timeout)
    try:
        yield client
    finally:
        client.close()


def _form_page(
    request: Request,
    *,
    title: str,
    action: str,
    form: dict[str, str],
    error: str | None = None,
    status_code: int = 200,
) -> HTMLResponse:
    statuses = list(STATUS_CHOICES)
    # Keep a stored free-text status as the selected option
    if form["status"] and form["status"] not in {value for value, _ in STATUS_CHOICES}:
        statuses.append((form["status"], form["status"]))
    return templates.TemplateResponse(
        request,
        "form.html",
        {"title": title, "action": action, "form": form, "error": error, "statuses": statuses},
        status_code=status_code,
    )


def _detail_page(
    request: Request,
    client: ReservationApiClient,
    reservation_id: int,
    *,
    notice: str | None = None,
) -> HTMLResponse:
    try:
        reservation = client.get_reservation(reservation_id)
    except ReservationNotFound:
        return templates.TemplateResponse(
            request, "detail.html", {"reservation": None, "error": None, "notice": notice}, status_code=404
        )
    except NetworkFailure as e:
        return templates.TemplateResponse(
            request, "detail.html", {"reservation": None, "error": str(e), "notice": notice}, status_code=502
        )
    return templates.TemplateResponse(
        request, "detail.html", {"reservation": reservation, "error": None, "notice": notice}
    )


def _submitted_form(member_name: str, destination: str, start_date: str, end_date: str, status: str) -> dict[str, str]:
    return {
        "memberName": member_name.strip(),
        "destination": destination.strip(),
        "startDate": start_date,
        "endDate": end_date,
        "status": status or ReservationStatus.PENDING.value,
    }


def _to_payload(form: dict[str, str]) -> ReservationPayload | None:
    if any(not form[field] for field in REQUIRED_FIELDS):
        return None
    try:
        return ReservationPayload.model_validate(form)
    except SchemaValidationError:
        return None


@router.get("/")
def get_index(request: Request) -> RedirectResponse:
    return RedirectResponse(str(request.url_for("get_reservations_page")), status_code=303)


@router.get("/reservations", response_class=HTMLResponse)
def get_reservations_page(request: Request, client: ReservationApiClient = Depends(get_api_client)) -> HTMLResponse:
    try:
        reservations = client.list_reservations()
    except NetworkFailure as e:
        return templates.TemplateResponse(
            request, "list.html", {"reservations": [], "error": str(e)}, status_code=502
        )
    return templates.TemplateResponse(request, "list.html", {"reservations": reservations, "error": None})


@router.get("/reservations/new", response_class=HTMLResponse)
def get_new_reservation_page(request: Request) -> HTMLResponse:
    empty = _submitted_form("", "", "", "", ReservationStatus.PENDING.value)
    return _form_page(request, title="Create Reservation", action=str(request.url_for("post_new_reservation")), form=empty)


@router.post("/reservations/new", response_class=HTMLResponse)
def post_new_reservation(
    request: Request,
    member_name: str = Form("", alias="memberName"),
    destination: str = Form(""),
    start_date: str = Form("", alias="startDate"),
    end_date: str = Form("", alias="endDate"),
    status: str = Form(ReservationStatus.PENDING.value),
    client: ReservationApiClient = Depends(get_api_client),
):
    form = _submitted_form(member_name, destination, start_date, end_date, status)
    action = str(request.url_for("post_new_reservation"))

    payload = _to_payload(form)
    if payload is None:
        return _form_page(
            request, title="Create Reservation", action=action, form=form, error=MISSING_FIELDS, status_code=400
        )

    try:
        client.create_reservation(payload)
    except NetworkFailure:
        return _form_page(
            request, title="Create Reservation", action=action, form=form, error=CREATE_FAILED, status_code=502
        )
    return RedirectResponse(str(request.url_for("get_reservations_page")), status_code=303)


@router.get("/reservations/{reservation_id}", response_class=HTMLResponse)
def get_reservation_page(
    request: Request,
    reservation_id: int,
    client: ReservationApiClient = Depends(get_api_client),
) -> HTMLResponse:
    return _detail_page(request, client, reservation_id)


@router.get("/reservations/{reservation_id}/edit", response_class=HTMLResponse)
def get_edit_reservation_page(
    request: Request,
    reservation_id: int,
    client: ReservationApiClient = Depends(get_api_client),
) -> HTMLResponse:
    try:
        reservation = client.get_reservation(reservation_id)
    except NetworkFailure:
        return _detail_page(request, client, reservation_id)

    form = {key: str(value) for key, value in reservation.model_dump(by_alias=True, exclude={"id"}).items()}
    action = str(request.url_for("post_edit_reservation", reservation_id=reservation_id))
    return _form_page(request, title="Edit Reservation", action=action, form=form)


@router.post("/reservations/{reservation_id}/edit", response_class=HTMLResponse)
def post_edit_reservation(
    request: Request,
    reservation_id: int,
    member_name: str = Form("", alias="memberName"),
    destination: str = Form(""),
    start_date: str = Form("", alias="startDate"),
    end_date: str = Form("", alias="endDate"),
    status: str = Form(ReservationStatus.PENDING.value),
    client: ReservationApiClient = Depends(get_api_client),
):
    form = _submitted_form(member_name, destination, start_date, end_date, status)
    action = str(request.url_for("post_edit_reservation", reservation_id=reservation_id))

    payload = _to_payload(form)
    if payload is None:
        return _form_page(
            request, title="Edit Reservation", action=action, form=form, error=MISSING_FIELDS, status_code=400
        )

    try:
        client.update_reservation(reservation_id, payload)
    except ReservationNotFound:
        return _detail_page(request, client, reservation_id)
    except NetworkFailure:
        return _form_page(
            request, title="Edit Reservation", action=action, form=form, error=UPDATE_FAILED, status_code=502
        )
    return RedirectResponse(
        str(request.url_for("get_reservation_page", reservation_id=reservation_id)), status_code=303
    )


@router.get("/reservations/{reservation_id}/delete", response_class=HTMLResponse)
def get_delete_confirmation_page(request: Request, reservation_id: int) -> HTMLResponse:
    return templates.TemplateResponse(request, "confirm_delete.html", {"reservation_id": reservation_id})


@router.post("/reservations/{reservation_id}/delete")
def post_delete_reservation(
    request: Request,
    reservation_id: int,
    client: ReservationApiClient = Depends(get_api_client),
):
    try:
        client.delete_reservation(reservation_id)
    except NetworkFailure:
        return _detail_page(request, client, reservation_id, notice=DELETE_FAILED)
    return RedirectResponse(str(request.url_for("get_reservations_page")), status_code=303)
