"""Tests for the endpoint services."""

from __future__ import annotations

import json
import re
from concurrent.futures import ThreadPoolExecutor
from datetime import date, datetime, time

import httpx
import pytest

from nausys_client import ApiError, DecodeError, NausysClient, ProviderError
from nausys_client.schemas import (
    AvailabilityRequest,
    Credentials,
    FreeYachtRequest,
    InfoRequest,
    OccupancyRequest,
    OptionBookingRequest,
    ReservationsRequest,
    YachtServiceItem,
)
from nausys_client.services import YachtService

API_ROOT = "/CBMS-external/rest"
CREDENTIALS = {"username": "agent", "password": "secret"}
ENVELOPE_ERROR = {"errorCode": 5, "status": "invalid"}


def test_services_share_one_client(make_client, recorder):
    client = make_client(recorder())
    services = [client.availability, client.company, client.occupancy, client.offers, client.yacht, client.reservation]
    assert len({id(service) for service in services}) == len(services)
    assert all(service.client is client for service in services)
    assert isinstance(client.yacht, YachtService)


def test_company_all_posts_bare_credentials(make_client, recorder, credentials_env):
    handler = recorder(
        payload={
            "status": "OK",
            "companies": [
                {"id": 1, "name": "Blue Sails", "bankAccounts": [{"iban": "HR12"}]},
                {"id": 2, "name": "Adriatic Charter", "countryId": 3},
            ],
        }
    )
    client = make_client(handler)

    result = client.company.all()

    assert handler.last_request.method == "POST"
    assert handler.last_request.url.path == f"{API_ROOT}/catalogue/v6/charterCompanies"
    assert handler.last_body == CREDENTIALS
    assert [company.name for company in result.companies] == ["Blue Sails", "Adriatic Charter"]
    assert result.companies[0].bank_accounts[0].iban == "HR12"
    assert result.companies[1].country_id == 3


def test_yacht_find_uses_id_in_path(make_client, recorder, credentials_env):
    handler = recorder(
        payload={
            "status": "OK",
            "yachts": [
                {
                    "id": 42,
                    "name": "Sea Breeze",
                    "berthsTotal": 8,
                    "checkInPeriods": [{"dateFrom": "01.05.2024", "checkInSaturday": True}],
                    "standardYachtEquipment": [{"id": 1, "comment": {"textEN": "Dinghy", "textDE": "Beiboot"}}],
                    "seasonSpecificData": [
                        {"seasonId": 3, "services": [{"serviceId": 11, "price": "150.00", "obligatory": True}]}
                    ],
                }
            ],
        }
    )
    client = make_client(handler)

    result = client.yacht.find(42)

    assert handler.last_request.url.path == f"{API_ROOT}/catalogue/v6/yacht/42"
    assert handler.last_body == CREDENTIALS
    yacht = result.yachts[0]
    assert yacht.berths_total == 8
    assert yacht.check_in_periods[0].date_from == date(2024, 5, 1)
    assert yacht.standard_yacht_equipment[0].comment.text_de == "Beiboot"
    service = yacht.season_specific_data[0].services[0]
    assert isinstance(service, YachtServiceItem)
    assert service.service_id == 11
    assert service.obligatory is True


def test_occupancy_embeds_company_and_year(make_client, recorder, credentials_env):
    handler = recorder(
        payload={
            "status": "OK",
            "companyId": 7,
            "year": 2024,
            "reservations": [
                {
                    "id": 99,
                    "yachtId": 42,
                    "periodFrom": "01.06.2024",
                    "checkInTime": "17:00:00",
                    "periodTo": "08.06.2024",
                    "checkOutTime": "09:00:00",
                }
            ],
        }
    )
    client = make_client(handler)

    result = client.occupancy.occupancy(OccupancyRequest(), 7, 2024)

    assert handler.last_request.url.path == f"{API_ROOT}/yachtReservation/v6/occupancy/7/2024"
    assert handler.last_body == {"credentials": CREDENTIALS}
    reservation = result.reservations[0]
    assert reservation.period_from == date(2024, 6, 1)
    assert reservation.check_in_time == time(17, 0)
    assert reservation.check_out_time == time(9, 0)


def test_availability_sends_filters_and_leaves_request_untouched(make_client, recorder, credentials_env):
    handler = recorder(
        payload={
            "status": "OK",
            "freeYachts": [
                {
                    "yachtId": 42,
                    "periodFrom": "01.06.2024",
                    "periodTo": "08.06.2024",
                    "price": {"clientPrice": "2500.00", "currency": "EUR", "discounts": [{"amount": 10, "type": "EARLY"}]},
                }
            ],
        }
    )
    client = make_client(handler)
    request = AvailabilityRequest(
        period_from=datetime(2024, 6, 1, 17, 0),
        period_to=datetime(2024, 6, 8, 9, 0),
        yacht_ids=[42, 43],
        order_by=1,
    )

    result = client.availability.get_availability(request)

    assert handler.last_request.url.path == f"{API_ROOT}/yachtReservation/v6/freeYachtsSearch"
    assert handler.last_body == {
        "credentials": CREDENTIALS,
        "periodFrom": "01.06.2024 17:00",
        "periodTo": "08.06.2024 09:00",
        "yachts": [42, 43],
        "orderby": 1,
    }
    assert request.credentials is None
    free_yacht = result.free_yachts[0]
    assert free_yacht.price.client_price == "2500.00"
    assert free_yacht.price.discounts[0].type == "EARLY"


def test_offers_posts_free_yacht_request(make_client, recorder, credentials_env):
    handler = recorder(payload={"status": "OK", "periodFrom": "01.06.2024", "freeYachts": []})
    client = make_client(handler)

    result = client.offers.get_offers(FreeYachtRequest(period_from=date(2024, 6, 1), companies=[7]))

    assert handler.last_request.url.path == f"{API_ROOT}/yachtReservation/v6/freeYachts"
    assert handler.last_body == {"credentials": CREDENTIALS, "periodFrom": "01.06.2024", "companies": [7]}
    assert result.period_from == date(2024, 6, 1)
    assert result.free_yachts == []


def test_offers_request_ignores_unknown_filters():
    request = FreeYachtRequest.model_validate({"periodFrom": "01.06.2024", "yachts": [42], "locations": [5]})

    assert request.model_dump(mode="json", by_alias=True, exclude_none=True) == {
        "periodFrom": "01.06.2024",
        "yachts": [42],
    }


def test_get_reservations(make_client, recorder, credentials_env):
    handler = recorder(
        payload={
            "status": "OK",
            "errorCode": 0,
            "reservations": [
                {
                    "id": 5,
                    "yachtID": 42,
                    "agencyVATID": "HR001",
                    "periodFrom": "01.06.2024 17:00",
                    "crewlistlink": "https://crew.test/5",
                    "client": {"name": "Ana", "surname": "Horvat"},
                }
            ],
        }
    )
    client = make_client(handler)

    result = client.reservation.get_reservations(ReservationsRequest(reservations=[5]))

    assert handler.last_request.url.path == f"{API_ROOT}/yachtReservation/v6/reservations"
    assert handler.last_body == {"credentials": CREDENTIALS, "reservations": [5]}
    info = result.reservations[0]
    assert info.yacht_id == 42
    assert info.agency_vat_id == "HR001"
    assert info.period_from == datetime(2024, 6, 1, 17, 0)
    assert info.crew_list_link == "https://crew.test/5"
    assert info.client.surname == "Horvat"


def test_create_info_sends_client_details(make_client, recorder, credentials_env):
    handler = recorder(payload={"id": 77, "uuid": "u-77", "reservationStatus": "INFO"})
    client = make_client(handler)
    request = InfoRequest(
        yacht_id=42,
        period_from=date(2024, 6, 1),
        period_to=date(2024, 6, 8),
        client_info={"name": "Ana", "surname": "Horvat & Co"},
    )

    result = client.reservation.create_info(request)

    assert handler.last_request.url.path == f"{API_ROOT}/yachtReservation/v6/createInfo"
    assert b"Horvat & Co" in handler.last_request.content
    assert handler.last_body["yachtID"] == 42
    assert handler.last_body["client"] == {"name": "Ana", "surname": "Horvat & Co"}
    assert result.uuid == "u-77"


@pytest.mark.parametrize(
    ("operation", "request_model"),
    [
        ("get_reservations", ReservationsRequest()),
        ("create_info", InfoRequest(yacht_id=1)),
        ("create_booking", OptionBookingRequest(id=1)),
    ],
)
def test_reservation_envelope_errors_are_raised(make_client, recorder, credentials_env, operation, request_model):
    client = make_client(recorder(payload=ENVELOPE_ERROR))
    with pytest.raises(ProviderError) as excinfo:
        getattr(client.reservation, operation)(request_model)
    assert excinfo.value.error_code == 5
    assert excinfo.value.response.status_code == 200


def test_create_option_skips_envelope_check(make_client, recorder, credentials_env):
    handler = recorder(payload={**ENVELOPE_ERROR, "id": 1})
    client = make_client(handler)

    result = client.reservation.create_option(OptionBookingRequest(id=1, uuid="u-1"))

    assert handler.last_request.url.path == f"{API_ROOT}/yachtReservation/v6/createOption"
    assert result.id == 1


def test_create_booking_succeeds_with_zero_error_code(make_client, recorder, credentials_env):
    handler = recorder(payload={"errorCode": 0, "status": "OK", "id": 1, "reservationStatus": "RESERVATION"})
    client = make_client(handler)

    result = client.reservation.create_booking(OptionBookingRequest(id=1, uuid="u-1"))

    assert handler.last_body == {"credentials": CREDENTIALS, "id": 1, "uuid": "u-1"}
    assert result.reservation_status == "RESERVATION"


def test_service_raises_api_error(make_client, recorder, credentials_env):
    client = make_client(recorder(status_code=500, content=b"internal error"))
    with pytest.raises(ApiError) as excinfo:
        client.company.all()
    assert excinfo.value.code == 500
    assert excinfo.value.content == "internal error"


def test_service_raises_decode_error(make_client, recorder, credentials_env):
    client = make_client(recorder(content=b"{"))
    with pytest.raises(DecodeError):
        client.yacht.find(1)


def test_service_rejects_bad_wire_dates(make_client, recorder, credentials_env):
    client = make_client(recorder(payload={"reservations": [{"periodFrom": "2024-06-01"}]}))
    with pytest.raises(DecodeError):
        client.occupancy.occupancy(OccupancyRequest(), 1, 2024)


def test_credentials_are_read_on_every_call(make_client, recorder, monkeypatch):
    handler = recorder(payload={"companies": []})
    client = make_client(handler)

    monkeypatch.setenv("NAUSYS_API_USERNAME", "first")
    monkeypatch.setenv("NAUSYS_API_PASSWORD", "one")
    client.company.all()
    monkeypatch.setenv("NAUSYS_API_USERNAME", "second")
    monkeypatch.setenv("NAUSYS_API_PASSWORD", "two")
    client.company.all()

    assert [json.loads(request.content)["username"] for request in handler.requests] == ["first", "second"]


def test_injected_credential_provider(recorder):
    handler = recorder(payload={"yachts": []})
    http_client = httpx.Client(transport=httpx.MockTransport(handler))
    client = NausysClient(
        "http://host/",
        http_client=http_client,
        credentials=lambda: Credentials(username="injected", password="pw"),
    )
    client.yacht.find(3)
    http_client.close()

    assert handler.last_body == {"username": "injected", "password": "pw"}


def test_concurrent_calls_do_not_interfere(make_client, credentials_env):
    def echo(request: httpx.Request) -> httpx.Response:
        match = re.search(r"/occupancy/(\d+)/(\d+)$", request.url.path)
        if match:
            return httpx.Response(200, json={"companyId": int(match.group(1)), "year": int(match.group(2))})
        yacht_id = int(re.search(r"/yacht/(\d+)$", request.url.path).group(1))
        return httpx.Response(200, json={"yachts": [{"id": yacht_id, "name": f"Yacht {yacht_id}"}]})

    client = make_client(echo)
    shared_request = OccupancyRequest()

    with ThreadPoolExecutor(max_workers=8) as pool:
        yachts = list(pool.map(client.yacht.find, range(50)))
        occupancy = list(pool.map(lambda company_id: client.occupancy.occupancy(shared_request, company_id, 2024), range(50)))

    assert [result.yachts[0].id for result in yachts] == list(range(50))
    assert [result.yachts[0].name for result in yachts] == [f"Yacht {i}" for i in range(50)]
    assert [result.company_id for result in occupancy] == list(range(50))
    assert shared_request.credentials is None


def test_services_module_does_not_bind_the_client():
    import nausys_client.services as services

    assert not hasattr(services, "NausysClient")
    assert services.check_error_envelope.__module__ == "nausys_client.response"
