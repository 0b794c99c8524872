"""Records returned by (and sent to) the partner API.

Attributes are snake_case; the wire format is camelCase. Unknown fields coming
back from the API are ignored, missing required ones fail validation.
"""

from __future__ import annotations

import datetime as dt
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class TravelbaseModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
        coerce_numbers_to_str=True,
    )


class RentalUnit(TravelbaseModel):
    id: int
    name: str
    code: str
    enabled: bool
    type: str
    max_allotment: int
    included_occupancy: int


class RentalUnitReference(TravelbaseModel):
    id: int


class Accommodation(TravelbaseModel):
    id: int
    enabled: bool
    name: str
    rental_units: List[RentalUnit] = Field(default_factory=list)


class Allotment(TravelbaseModel):
    date: dt.date
    amount: int


class AllotmentCollection(TravelbaseModel):
    """Ordered allotments for one rental unit."""

    allotments: List[Allotment] = Field(default_factory=list)

    @classmethod
    def from_records(cls, records: Iterable[Mapping[str, Any]]) -> "AllotmentCollection":
        """Build a collection from plain ``{"date": ..., "amount": ...}`` mappings."""
        return cls.model_validate({"allotments": list(records)})

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)

    def __iter__(self) -> Iterator[Allotment]:  # type: ignore[override]
        return iter(self.allotments)

    def __len__(self) -> int:
        return len(self.allotments)

    def __getitem__(self, index: int) -> Allotment:
        return self.allotments[index]


class TripPricing(TravelbaseModel):
    date: dt.date
    duration: int
    price: float
    minimum_stay_price: Optional[float] = None
    extra_person_price: Optional[float] = None


class TripPricingCollection(TravelbaseModel):
    """Ordered trip pricings for one rental unit."""

    trip_pricings: List[TripPricing] = Field(default_factory=list)

    @classmethod
    def from_records(cls, records: Iterable[Mapping[str, Any]]) -> "TripPricingCollection":
        return cls.model_validate({"tripPricings": list(records)})

    def to_payload(self) -> Dict[str, Any]:
        # optional prices are left out rather than sent as null
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    def __iter__(self) -> Iterator[TripPricing]:  # type: ignore[override]
        return iter(self.trip_pricings)

    def __len__(self) -> int:
        return len(self.trip_pricings)

    def __getitem__(self, index: int) -> TripPricing:
        return self.trip_pricings[index]


class PriceLine(TravelbaseModel):
    category: Optional[str] = None
    label: str
    unit_price: Optional[float] = None
    modifier: Optional[str] = None
    total_price: float


class Address(TravelbaseModel):
    street: Optional[str] = None
    number: Optional[str] = None
    postal_code: Optional[str] = None
    city: Optional[str] = None
    country_code: Optional[str] = None
    country_name: Optional[str] = None


class Order(TravelbaseModel):
    id: int
    locale: Optional[str] = None
    customer_first_name: Optional[str] = None
    customer_infix: Optional[str] = None
    customer_last_name: Optional[str] = None
    customer_phone_number: Optional[str] = None
    customer_email: Optional[str] = None
    customer_address: Optional[Address] = None


class Booking(TravelbaseModel):
    id: int
    number: str
    arrival_date: dt.date
    departure_date: dt.date
    duration: int
    amount_adults: int
    amount_children: int
    amount_babies: int
    amount_dogs: int
    status: str
    customer_comment: Optional[str] = None
    rental_sum: Optional[float] = None
    travel_sum: Optional[float] = None
    created_at: Optional[dt.datetime] = None
    updated_at: Optional[dt.datetime] = None
    rental_unit: RentalUnitReference
    partner_price_lines: List[PriceLine] = Field(default_factory=list)
    order: Optional[Order] = None


class PageInfo(TravelbaseModel):
    has_next_page: bool
    has_previous_page: bool
    start_cursor: Optional[str] = None
    end_cursor: Optional[str] = None


class BookingEdge(TravelbaseModel):
    cursor: str
    node: Booking


class BookingConnection(TravelbaseModel):
    """Cursor-paginated list of bookings."""

    total_count: int
    page_info: PageInfo
    edges: List[BookingEdge] = Field(default_factory=list)

    @property
    def nodes(self) -> List[Booking]:
        return [edge.node for edge in self.edges]


class Partner(TravelbaseModel):
    id: int
    enabled: bool
    company_name: str
    accommodations: List[Accommodation] = Field(default_factory=list)


class PartnerBookings(TravelbaseModel):
    """A partner as returned by the booking queries: only the requested connection is selected."""

    upcoming_bookings: Optional[BookingConnection] = None
    recently_updated_bookings: Optional[BookingConnection] = None
    all_bookings: Optional[BookingConnection] = None
