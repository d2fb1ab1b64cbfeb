from __future__ import annotations

from typing import Any

import httpx
from loguru import logger
from pydantic import TypeAdapter

from tripdesk.schemas.models import Reservation, ReservationPayload


_RESERVATION = TypeAdapter(Reservation)
_RESERVATION_LIST = TypeAdapter(list[Reservation])


class NetworkFailure(Exception):
    """The call did not complete or the API answered with a non-2xx status."""


class ReservationNotFound(NetworkFailure):
    """The API answered 404 for a reservation id."""


class ReservationApiClient:
    """
    Thin wrapper over the reservation API. Every failure surfaces as NetworkFailure
    carrying a static message; nothing is retried.
    """

    def __init__(self, base_url: str, *, timeout: float = 10.0, transport: httpx.BaseTransport | None = None) -> None:
        self._base_url = base_url.rstrip("/")
        self._http = httpx.Client(timeout=timeout, transport=transport)

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> ReservationApiClient:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def _request(self, method: str, url: str, failure: str, **kwargs: Any) -> httpx.Response:
        try:
            res = self._http.request(method, url, **kwargs)
        except httpx.HTTPError as e:
            logger.warning(f"{method} {url} did not complete: {e}")
            raise NetworkFailure(failure) from e

        if res.status_code == 404:
            raise ReservationNotFound("Reservation not found")
        if not res.is_success:
            logger.warning(f"{method} {url} answered {res.status_code}")
            raise NetworkFailure(failure)
        return res

    def _parse(self, res: httpx.Response, adapter: TypeAdapter, failure: str) -> Any:
        # Covers both a non-JSON body and JSON of the wrong shape
        try:
            return adapter.validate_json(res.content)
        except ValueError as e:
            logger.warning(f"{res.request.method} {res.request.url} returned an unreadable body: {e}")
            raise NetworkFailure(failure) from e

    def _item_url(self, reservation_id: int | str) -> str:
        return f"{self._base_url}/{reservation_id}"

    def list_reservations(self) -> list[Reservation]:
        failure = "Failed to fetch reservations"
        res = self._request("GET", self._base_url, failure)
        return self._parse(res, _RESERVATION_LIST, failure)

    def get_reservation(self, reservation_id: int | str) -> Reservation:
        failure = "Failed to fetch reservation"
        res = self._request("GET", self._item_url(reservation_id), failure)
        return self._parse(res, _RESERVATION, failure)

    def create_reservation(self, payload: ReservationPayload) -> Reservation:
        failure = "Failed to create reservation"
        res = self._request(
            "POST",
            self._base_url,
            failure,
            json=payload.model_dump(mode="json", by_alias=True),
        )
        return self._parse(res, _RESERVATION, failure)

    def update_reservation(self, reservation_id: int | str, payload: ReservationPayload) -> None:
        self._request(
            "PUT",
            self._item_url(reservation_id),
            "Failed to update reservation",
            json=payload.model_dump(mode="json", by_alias=True),
        )

    def delete_reservation(self, reservation_id: int | str) -> None:
        self._request("DELETE", self._item_url(reservation_id), "Failed to delete reservation")
