# Partner API read queries
from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from travelbase.graphql.document import Field, Operation

DEFAULT_LIMIT = 10

RENTAL_UNIT_FIELDS = (
    "id",
    "name",
    "code",
    "enabled",
    "type",
    "maxAllotment",
    "includedOccupancy",
)

ACCOMMODATION_FIELDS = (
    "id",
    "enabled",
    "name",
    Field.of("rentalUnits", *RENTAL_UNIT_FIELDS),
)

PARTNER_FIELDS = (
    "id",
    "enabled",
    "companyName",
    Field.of("accommodations", *ACCOMMODATION_FIELDS),
)

PAGE_INFO_FIELDS = (
    "hasNextPage",
    "hasPreviousPage",
    "startCursor",
    "endCursor",
)

PRICE_LINE_FIELDS = (
    "category",
    "label",
    "unitPrice",
    "modifier",
    "totalPrice",
)

ADDRESS_FIELDS = (
    "street",
    "number",
    "postalCode",
    "city",
    "countryCode",
    "countryName",
)

ORDER_FIELDS = (
    "id",
    "locale",
    "customerFirstName",
    "customerInfix",
    "customerLastName",
    "customerPhoneNumber",
    "customerEmail",
    Field.of("customerAddress", *ADDRESS_FIELDS),
)

BOOKING_FIELDS = (
    "id",
    "number",
    "arrivalDate",
    "departureDate",
    "duration",
    "amountAdults",
    "amountChildren",
    "amountBabies",
    "amountDogs",
    "status",
    "customerComment",
    "rentalSum",
    "travelSum",
    "createdAt",
    "updatedAt",
    Field.of("rentalUnit", "id"),
    Field.of("partnerPriceLines", *PRICE_LINE_FIELDS),
    Field.of("order", *ORDER_FIELDS),
)

BOOKING_CONNECTION_FIELDS = (
    "totalCount",
    Field.of("pageInfo", *PAGE_INFO_FIELDS),
    Field.of("edges", "cursor", Field.of("node", *BOOKING_FIELDS)),
)

# partner sub-fields that hold a booking connection
UPCOMING_BOOKINGS = "upcomingBookings"
RECENTLY_UPDATED_BOOKINGS = "recentlyUpdatedBookings"
ALL_BOOKINGS = "allBookings"


def partners_query() -> Operation:
    return Operation("query", "Partners", Field.of("partners", *PARTNER_FIELDS))


def partner_query(partner_id: int) -> Operation:
    return Operation("query", "Partner", Field.of("partner", *PARTNER_FIELDS, id=partner_id))


def accommodation_query(accommodation_id: int) -> Operation:
    return Operation(
        "query",
        "Accommodation",
        Field.of("accommodation", *ACCOMMODATION_FIELDS, id=accommodation_id),
    )


def rental_unit_query(rental_unit_id: int) -> Operation:
    return Operation(
        "query",
        "RentalUnit",
        Field.of("rentalUnit", *RENTAL_UNIT_FIELDS, id=rental_unit_id),
    )


def _partner_bookings_query(
    operation_name: str,
    connection: str,
    partner_id: int,
    limit: int,
    cursor: Optional[str],
    **filters,
) -> Operation:
    bookings = Field.of(connection, *BOOKING_CONNECTION_FIELDS, first=limit, after=cursor, **filters)
    return Operation("query", operation_name, Field.of("partner", bookings, id=partner_id))


def upcoming_bookings_query(partner_id: int, limit: int = DEFAULT_LIMIT, cursor: Optional[str] = None) -> Operation:
    return _partner_bookings_query("UpcomingBookings", UPCOMING_BOOKINGS, partner_id, limit, cursor)


def recently_updated_bookings_query(
    partner_id: int, limit: int = DEFAULT_LIMIT, cursor: Optional[str] = None
) -> Operation:
    return _partner_bookings_query("RecentlyUpdatedBookings", RECENTLY_UPDATED_BOOKINGS, partner_id, limit, cursor)


def all_bookings_query(
    partner_id: int,
    limit: int = DEFAULT_LIMIT,
    cursor: Optional[str] = None,
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
    search_query: Optional[str] = None,
    rental_unit_ids: Optional[Sequence[int]] = None,
) -> Operation:
    """
    startDate/endDate go out as YYYY-MM-DD strings. Filters left as None (or empty)
    are not sent at all.
    """
    return _partner_bookings_query(
        "AllBookings",
        ALL_BOOKINGS,
        partner_id,
        limit,
        cursor,
        startDate=start_date,
        endDate=end_date,
        searchQuery=search_query,
        rentalUnitIds=tuple(rental_unit_ids) if rental_unit_ids else None,
    )
