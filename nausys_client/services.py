"""Endpoint operations grouped by NauSYS resource.

Each service holds a reference to the shared NausysClient; none keeps state
of its own, so any of them can be replaced by a stub in tests.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

from pydantic import BaseModel

from .config import CATALOGUE_URL, RESERVATION_URL
from .response import check_error_envelope
from .schemas import (
    AvailabilityRequest,
    CompanyListResponse,
    FreeYachtListResponse,
    FreeYachtRequest,
    InfoRequest,
    OccupancyListResponse,
    OccupancyRequest,
    OptionBookingRequest,
    ReservationInfo,
    ReservationsList,
    ReservationsRequest,
    YachtListResponse,
)

if TYPE_CHECKING:
    from .client import NausysClient

T = TypeVar("T")
M = TypeVar("M", bound=BaseModel)


class Service:
    """Shared plumbing for the endpoint services."""

    def __init__(self, client: NausysClient) -> None:
        self.client = client

    def _with_credentials(self, request: M) -> M:
        """Return a copy of ``request`` carrying fresh credentials."""
        return request.model_copy(update={"credentials": self.client.credentials()})

    def _post(self, path: str, body: object, result_type: type[T], *, check_envelope: bool = False) -> T:
        request = self.client.build_request("POST", path, body)
        response = self.client.send(request)
        if check_envelope:
            check_error_envelope(response)
        return response.decode(result_type)


class AvailabilityService(Service):
    def get_availability(self, request: AvailabilityRequest) -> FreeYachtListResponse:
        """Search free yachts matching the request filters."""
        return self._post(
            f"{RESERVATION_URL}/freeYachtsSearch",
            self._with_credentials(request),
            FreeYachtListResponse,
        )


class CompanyService(Service):
    def all(self) -> CompanyListResponse:
        """Return all charter companies."""
        return self._post(
            f"{CATALOGUE_URL}/charterCompanies",
            self.client.credentials(),
            CompanyListResponse,
        )


class OccupancyService(Service):
    def occupancy(self, request: OccupancyRequest, company_id: int, year: int) -> OccupancyListResponse:
        """Return every reservation of a company in a year, whoever made it."""
        return self._post(
            f"{RESERVATION_URL}/occupancy/{company_id}/{year}",
            self._with_credentials(request),
            OccupancyListResponse,
        )


class OffersService(Service):
    def get_offers(self, request: FreeYachtRequest) -> FreeYachtListResponse:
        return self._post(
            f"{RESERVATION_URL}/freeYachts",
            self._with_credentials(request),
            FreeYachtListResponse,
        )


class YachtService(Service):
    def find(self, yacht_id: int) -> YachtListResponse:
        """Look up a single yacht by id."""
        return self._post(
            f"{CATALOGUE_URL}/yacht/{yacht_id}",
            self.client.credentials(),
            YachtListResponse,
        )


class ReservationService(Service):
    """Reservation listing and the info -> option -> booking lifecycle."""

    def get_reservations(self, request: ReservationsRequest) -> ReservationsList:
        return self._post(
            f"{RESERVATION_URL}/reservations",
            self._with_credentials(request),
            ReservationsList,
            check_envelope=True,
        )

    def create_info(self, request: InfoRequest) -> ReservationInfo:
        """Create an info reservation."""
        return self._post(
            f"{RESERVATION_URL}/createInfo",
            self._with_credentials(request),
            ReservationInfo,
            check_envelope=True,
        )

    def create_option(self, request: OptionBookingRequest) -> ReservationInfo:
        """Turn an info reservation into an option."""
        return self._post(
            f"{RESERVATION_URL}/createOption",
            self._with_credentials(request),
            ReservationInfo,
        )

    def create_booking(self, request: OptionBookingRequest) -> ReservationInfo:
        """Turn an option into a booking."""
        return self._post(
            f"{RESERVATION_URL}/createBooking",
            self._with_credentials(request),
            ReservationInfo,
            check_envelope=True,
        )
