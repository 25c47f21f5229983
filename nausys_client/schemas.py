"""Pydantic schemas for NauSYS requests and responses."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .dates import NausysDate, NausysDateTime, NausysTime


class NausysModel(BaseModel):
    """Base model mapping snake_case attributes to the camelCase wire names."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class Credentials(NausysModel):
    """Provider account stamped onto every request."""

    username: str
    password: str


class ErrorEnvelope(NausysModel):
    """Error signal embedded in an otherwise successful response body."""

    error_code: Optional[int] = 0
    status: Optional[str] = None


class Period(NausysModel):
    period_from: Optional[NausysDate] = None
    period_to: Optional[NausysDate] = None


class InternationalText(NausysModel):
    """Translations of a single text."""

    text_de: Optional[str] = Field(default=None, alias="textDE")
    text_en: Optional[str] = Field(default=None, alias="textEN")
    text_hr: Optional[str] = Field(default=None, alias="textHR")
    text_it: Optional[str] = Field(default=None, alias="textIT")
    text_si: Optional[str] = Field(default=None, alias="textSI")
    text_ru: Optional[str] = Field(default=None, alias="textRU")
    text_cz: Optional[str] = Field(default=None, alias="textCZ")
    text_fr: Optional[str] = Field(default=None, alias="textFR")
    text_pl: Optional[str] = Field(default=None, alias="textPL")
    text_sk: Optional[str] = Field(default=None, alias="textSK")
    text_nl: Optional[str] = Field(default=None, alias="textNL")
    text_es: Optional[str] = Field(default=None, alias="textES")


class Discount(NausysModel):
    discounted_item_id: Optional[int] = None
    amount: Optional[float] = None
    type: Optional[str] = None


class PaymentPlan(NausysModel):
    date: Optional[NausysDate] = None
    percentage: Optional[int] = None


class BookingPaymentPlan(NausysModel):
    """Payment plan created as part of a booking."""

    id: Optional[int] = None
    date: Optional[NausysDate] = None
    amount: Optional[str] = None
    amount_payment_currency: Optional[str] = None
    paid: Optional[bool] = None
    online_payment_link: Optional[str] = None
    online_payment_valid_u_till: Optional[NausysDateTime] = None


class Payment(NausysModel):
    id: Optional[int] = None
    date: Optional[str] = None
    amount: Optional[str] = None
    amount_payment_currency: Optional[str] = None
    payment_currency: Optional[str] = None


class ClientInfo(NausysModel):
    """Charter client attached to a reservation."""

    company: Optional[bool] = None
    vat_nr: Optional[str] = None
    name: Optional[str] = None
    surname: Optional[str] = None
    address: Optional[str] = None
    zip: Optional[str] = None
    city: Optional[str] = None
    country_id: Optional[int] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    mobile: Optional[str] = None
    skype: Optional[str] = None


# Availability and offers


class AvailabilityRequest(NausysModel):
    """Request payload for the free-yacht availability search."""

    credentials: Optional[Credentials] = None
    period_from: Optional[NausysDateTime] = None
    period_to: Optional[NausysDateTime] = None
    yacht_ids: Optional[List[int]] = Field(default=None, alias="yachts")
    price_from: Optional[int] = None
    price_to: Optional[int] = None
    order_by: Optional[int] = Field(default=None, alias="orderby")
    direction: Optional[int] = None
    ignore_availability: Optional[bool] = None
    periods: Optional[List[Period]] = None
    include_extended_data_set: Optional[bool] = None


class FreeYachtRequest(NausysModel):
    """Request payload for the free-yacht offers listing."""

    credentials: Optional[Credentials] = None
    period_from: Optional[NausysDate] = None
    period_to: Optional[NausysDate] = None
    yachts: Optional[List[int]] = None
    companies: Optional[List[int]] = None


class YachtReservationPriceInfo(NausysModel):
    price_list_price: Optional[str] = None
    client_price: Optional[str] = None
    currency: Optional[str] = None
    deposit_amount: Optional[str] = None
    deposit_when_insured_amount: Optional[str] = None
    discounts: Optional[List[Discount]] = None


class FreeYacht(NausysModel):
    """A yacht that is free in the given period."""

    yacht_id: Optional[int] = None
    period_from: Optional[NausysDate] = None
    period_to: Optional[NausysDate] = None
    price: Optional[YachtReservationPriceInfo] = None
    location_from_id: Optional[int] = None
    location_to_id: Optional[int] = None


class FreeYachtListResponse(NausysModel):
    status: Optional[str] = None
    error_code: Optional[int] = None
    period_from: Optional[NausysDate] = None
    period_to: Optional[NausysDate] = None
    free_yachts: List[FreeYacht] = Field(default_factory=list)
    payment_plans: Optional[List[PaymentPlan]] = None


# Companies


class BankAccount(NausysModel):
    bank_name: Optional[str] = None
    bank_address: Optional[str] = None
    swift: Optional[str] = None
    iban: Optional[str] = None


class Company(NausysModel):
    """Charter company."""

    id: Optional[int] = None
    country_id: Optional[int] = None
    name: Optional[str] = None
    company_name: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    zip: Optional[str] = None
    phone: Optional[str] = None
    mobile: Optional[str] = None
    vatcode: Optional[str] = None
    web: Optional[str] = None
    email: Optional[str] = None
    pac: Optional[int] = None
    bank_accounts: Optional[List[BankAccount]] = None


class CompanyListResponse(NausysModel):
    status: Optional[str] = None
    error_code: Optional[int] = None
    companies: List[Company] = Field(default_factory=list)


# Occupancy


class OccupancyRequest(NausysModel):
    credentials: Optional[Credentials] = None


class Reservation(NausysModel):
    """Reservation row reported by the occupancy endpoint."""

    id: Optional[int] = None
    yacht_id: Optional[int] = None
    location_from_id: Optional[int] = None
    location_to_id: Optional[int] = None
    reservation_type: Optional[str] = None
    period_from: Optional[NausysDate] = None
    check_in_time: Optional[NausysTime] = None
    period_to: Optional[NausysDate] = None
    check_out_time: Optional[NausysTime] = None


class OccupancyListResponse(NausysModel):
    status: Optional[str] = None
    company_id: Optional[int] = None
    year: Optional[int] = None
    reservations: List[Reservation] = Field(default_factory=list)


# Yachts


class YachtEquipment(NausysModel):
    id: Optional[int] = None
    quantity: Optional[int] = None
    equipment_id: Optional[int] = None
    highlight: Optional[bool] = None
    comment: Optional[InternationalText] = None


class Euminia(NausysModel):
    """Overall rating given to a yacht."""

    cleanliness: Optional[str] = None
    equipment: Optional[str] = None
    personal_service: Optional[str] = None
    price_performance: Optional[str] = None
    recommendation: Optional[str] = None
    total: Optional[str] = None
    reviews: Optional[str] = None


class AdditionalYachtEquipment(NausysModel):
    """Equipment that can be booked with a yacht."""

    id: Optional[int] = None
    quantity: Optional[int] = None
    price: Optional[str] = None
    currency: Optional[str] = None
    equipment_id: Optional[int] = None
    comment: Optional[InternationalText] = None
    price_measure_id: Optional[int] = None
    calculation_type: Optional[str] = None
    condition: Optional[InternationalText] = None
    amount: Optional[str] = None
    amount_is_percentage: Optional[bool] = None
    percentage_calculation_type: Optional[str] = None
    valid_for_bases: Optional[List[int]] = None
    minimum_price: Optional[str] = None


class YachtServiceItem(NausysModel):
    """Service offered with a yacht."""

    id: Optional[int] = None
    service_id: Optional[int] = None
    price: Optional[str] = None
    currency: Optional[str] = None
    price_measure_id: Optional[int] = None
    calculation_type: Optional[str] = None
    description: Optional[InternationalText] = None
    obligatory: Optional[bool] = None
    amount: Optional[str] = None
    amount_is_percentage: Optional[bool] = None
    percentage_calculation_type: Optional[str] = None
    valid_period_from: Optional[str] = None
    valid_period_to: Optional[str] = None
    valid_min_pax: Optional[int] = None
    valid_max_pax: Optional[int] = None
    valid_for_bases: Optional[List[int]] = None
    minimum_price: Optional[str] = None


class YachtPrice(NausysModel):
    id: Optional[int] = None
    date_from: Optional[str] = None
    date_to: Optional[str] = None
    price: Optional[float] = None
    currency: Optional[str] = None
    type: Optional[str] = None
    location_id: Optional[List[int]] = None


class YachtSeason(NausysModel):
    """Season specific equipment, services, prices and discounts of a yacht."""

    season_id: Optional[int] = None
    base_id: Optional[int] = None
    location_id: Optional[int] = None
    additional_yacht_equipment: Optional[List[AdditionalYachtEquipment]] = None
    services: Optional[List[YachtServiceItem]] = None
    prices: Optional[List[YachtPrice]] = None
    regular_discounts: Optional[List[Discount]] = None


class OneWayPeriod(NausysModel):
    id: Optional[int] = None
    period_from: Optional[NausysDate] = None
    period_to: Optional[NausysDate] = None
    base_id: Optional[int] = None
    location_id: Optional[int] = None


class CheckInPeriod(NausysModel):
    """Minimal reservation length and allowed check-in/check-out days."""

    date_from: Optional[NausysDate] = None
    date_to: Optional[NausysDate] = None
    minimal_reservation_duration: Optional[int] = None
    check_in_monday: Optional[bool] = None
    check_in_tuesday: Optional[bool] = None
    check_in_wednesday: Optional[bool] = None
    check_in_thursday: Optional[bool] = None
    check_in_friday: Optional[bool] = None
    check_in_saturday: Optional[bool] = None
    check_in_sunday: Optional[bool] = None
    check_out_monday: Optional[bool] = None
    check_out_tuesday: Optional[bool] = None
    check_out_wednesday: Optional[bool] = None
    check_out_thursday: Optional[bool] = None
    check_out_friday: Optional[bool] = None
    check_out_saturday: Optional[bool] = None
    check_out_sunday: Optional[bool] = None


class Yacht(NausysModel):
    """Catalogue entry for a single yacht."""

    id: Optional[int] = None
    name: Optional[str] = None
    company_id: Optional[int] = None
    base_id: Optional[int] = None
    location_id: Optional[int] = None
    yacht_model_id: Optional[int] = None
    draft: Optional[float] = None
    cabins: Optional[int] = None
    cabin_crew: Optional[int] = None
    berths_cabin: Optional[int] = None
    berths_salon: Optional[int] = None
    berths_crew: Optional[int] = None
    berths_total: Optional[int] = None
    wc: Optional[int] = None
    wc_crew: Optional[int] = None
    engines: Optional[int] = None
    engine_power: Optional[float] = None
    steering_type_id: Optional[int] = None
    sail_type_id: Optional[int] = None
    sail_renewed: Optional[int] = None
    genoa_type_id: Optional[int] = None
    genoa_renewed: Optional[int] = None
    standard_yacht_equipment: Optional[List[YachtEquipment]] = None
    euminia: Optional[Euminia] = None
    main_picture_url: Optional[str] = None
    pictures_url: Optional[List[str]] = None
    commission: Optional[float] = None
    deposit: Optional[float] = None
    deposit_currency: Optional[str] = None
    max_discount: Optional[float] = None
    season_specific_data: Optional[List[YachtSeason]] = None
    needs_option_approval: Optional[bool] = None
    can_make_booking_fixed: Optional[bool] = None
    flags_id: Optional[List[int]] = None
    charter_type: Optional[str] = None
    fuel_tank: Optional[int] = None
    water_tank: Optional[int] = None
    mast_length: Optional[float] = None
    propulsion_type: Optional[str] = None
    one_way_periods: Optional[List[OneWayPeriod]] = None
    number_of_rudder_blades: Optional[int] = None
    engine_builder_id: Optional[int] = None
    hull_color: Optional[str] = None
    third_party_insurance_amount: Optional[float] = None
    third_party_insurance_currency: Optional[str] = None
    check_in_periods: Optional[List[CheckInPeriod]] = None


class YachtListResponse(NausysModel):
    status: Optional[str] = None
    error_code: Optional[int] = None
    yachts: List[Yacht] = Field(default_factory=list)
    yacht_ids: Optional[List[int]] = None


# Reservations


class ReservationsRequest(NausysModel):
    """Request payload for listing reservations."""

    credentials: Optional[Credentials] = None
    period_from: Optional[NausysDate] = None
    period_to: Optional[NausysDate] = None
    include_waiting_options: Optional[bool] = None
    reservations: Optional[List[int]] = None


class InfoRequest(NausysModel):
    """Request payload for creating an info reservation."""

    credentials: Optional[Credentials] = None
    client_info: Optional[ClientInfo] = Field(default=None, alias="client")
    yacht_id: Optional[int] = Field(default=None, alias="yachtID")
    period_from: Optional[NausysDate] = None
    period_to: Optional[NausysDate] = None
    services: Optional[List[int]] = None
    equipment: Optional[List[int]] = None
    online_payment: Optional[str] = None
    promo_code: Optional[str] = None
    number_of_payments: Optional[int] = None
    payment_currency: Optional[str] = None
    use_deposit_payment: Optional[str] = None
    agency_client_discount_amount: Optional[str] = None
    agency_client_discount_amount_type: Optional[str] = None


class OptionBookingRequest(NausysModel):
    """Request payload for turning a reservation into an option or a booking."""

    credentials: Optional[Credentials] = None
    id: Optional[int] = None
    uuid: Optional[str] = None
    create_waiting_option: Optional[bool] = None


class ReservationInfo(NausysModel):
    """Full reservation as returned by the reservation endpoints."""

    id: Optional[int] = None
    uuid: Optional[str] = None
    reservation_status: Optional[str] = None
    waiting_for_option: Optional[bool] = None
    yacht_id: Optional[int] = Field(default=None, alias="yachtID")
    base_from_id: Optional[int] = None
    base_to_id: Optional[int] = None
    location_from_id: Optional[int] = None
    location_to_id: Optional[int] = None
    period_from: Optional[NausysDateTime] = None
    period_to: Optional[NausysDateTime] = None
    option_till: Optional[str] = None
    agency: Optional[str] = None
    agency_vat_id: Optional[str] = Field(default=None, alias="agencyVATID")
    client: Optional[ClientInfo] = None
    discounts: Optional[List[Discount]] = None
    additional_equipment: Optional[List[AdditionalYachtEquipment]] = None
    services: Optional[List[YachtServiceItem]] = None
    price_list_price: Optional[str] = None
    agency_price: Optional[str] = None
    client_price: Optional[str] = None
    currency: Optional[str] = None
    payment_currency: Optional[str] = None
    localized_final_price: Optional[str] = None
    online_payment_amount: Optional[str] = None
    approved: Optional[bool] = None
    crew_list_link: Optional[str] = Field(default=None, alias="crewlistlink")
    created_date: Optional[str] = None
    payment_plan: Optional[List[BookingPaymentPlan]] = None
    payments: Optional[List[Payment]] = None
    use_deposit_payment: Optional[bool] = None
    number_of_payments: Optional[int] = None
    owner_booking: Optional[bool] = None
    agency_additional_discount_amount: Optional[str] = None
    agency_client_final_price: Optional[str] = None


class ReservationsList(NausysModel):
    status: Optional[str] = None
    error_code: Optional[int] = None
    reservations: List[ReservationInfo] = Field(default_factory=list)
