from datetime import date, datetime, timezone

import pytest

from helpers import load_fixture
from travelbase.errors import DeserializationError
from travelbase.responses import (
    CreateOrReplaceAllotmentsResult,
    CreateOrReplaceTripPricingsResult,
    DeleteTripsResult,
    PartnerBookingsResult,
    PartnerResult,
    PartnersResult,
    RentalUnitResult,
    parse_response,
)


def test_partners_are_mapped_and_extra_fields_ignored():
    result = parse_response(load_fixture("partners.json"), PartnersResult)

    assert [p.company_name for p in result.partners] == ["Strandhuisjes BV", "Camping De Horizon"]
    first = result.partners[0]
    assert first.id == 5
    assert first.enabled is True
    unit = first.accommodations[0].rental_units[0]
    assert unit.id == 12
    assert unit.max_allotment == 1
    assert unit.included_occupancy == 4
    assert not hasattr(unit, "slug")
    assert result.partners[1].accommodations == []


def test_booking_connection_dates_and_nesting():
    result = parse_response(load_fixture("upcoming_bookings.json"), PartnerBookingsResult)
    conn = result.partner.upcoming_bookings

    booking = conn.nodes[0]
    assert booking.arrival_date == date(2020, 7, 3)
    assert booking.created_at == datetime(2020, 4, 29, 10, 15, tzinfo=timezone.utc)
    assert booking.rental_unit.id == 12
    assert [line.label for line in booking.partner_price_lines] == ["Rent", "Dog"]
    assert booking.order.customer_address.postal_code == "1234 AB"
    assert conn.nodes[1].order.customer_address is None
    assert conn.nodes[1].rental_sum == 310.0


def test_mutation_results():
    allotments = parse_response(
        '{"data": {"createOrReplaceAllotments": {"allotments": [{"amount": 3, "date": "2020-01-01"}]}}}',
        CreateOrReplaceAllotmentsResult,
    ).create_or_replace_allotments
    pricings = parse_response(
        '{"data": {"createOrReplaceTripPricings": {"tripPricings": ['
        '{"date": "2020-01-01", "duration": 7, "price": 100, "minimumStayPrice": null, "extraPersonPrice": null}]}}}',
        CreateOrReplaceTripPricingsResult,
    ).create_or_replace_trip_pricings
    deleted = parse_response('{"data": {"deleteTrips": {"message": "Deleted 4 trips"}}}', DeleteTripsResult)

    assert allotments[0].date == date(2020, 1, 1)
    assert allotments[0].amount == 3
    assert pricings[0].price == 100.0
    assert pricings[0].minimum_stay_price is None
    assert deleted.delete_trips.message == "Deleted 4 trips"


def test_missing_required_field_raises():
    with pytest.raises(DeserializationError, match="PartnerResult"):
        parse_response('{"data": {}}', PartnerResult)


def test_partner_without_required_fields_raises():
    with pytest.raises(DeserializationError, match="PartnerResult"):
        parse_response('{"data": {"partner": {}}}', PartnerResult)


def test_partner_bookings_need_no_profile_fields():
    result = parse_response('{"data": {"partner": {}}}', PartnerBookingsResult)

    assert result.partner.upcoming_bookings is None
    assert result.partner.all_bookings is None


def test_missing_nested_required_field_raises():
    body = '{"data": {"rentalUnit": {"id": 12, "name": "Duinzicht 4p"}}}'

    with pytest.raises(DeserializationError):
        parse_response(body, RentalUnitResult)


def test_null_data_keeps_graphql_errors():
    body = '{"data": null, "errors": [{"message": "Partner not found", "path": ["partner"]}]}'

    with pytest.raises(DeserializationError, match="Partner not found") as exc_info:
        parse_response(body, PartnerResult)

    assert exc_info.value.graphql_errors == ["Partner not found"]


def test_partial_data_with_errors_reports_both():
    body = '{"data": {"partner": null}, "errors": [{"message": "Not authorized"}]}'

    with pytest.raises(DeserializationError, match="Not authorized") as exc_info:
        parse_response(body, PartnerResult)

    assert exc_info.value.graphql_errors == ["Not authorized"]


@pytest.mark.parametrize("body", ["not json", "[1, 2]", '"data"'])
def test_malformed_bodies_raise(body):
    with pytest.raises(DeserializationError):
        parse_response(body, PartnersResult)
