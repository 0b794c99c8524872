from __future__ import annotations

import datetime as dt
from typing import List, Optional, Sequence, Union

from pydantic.alias_generators import to_snake

from travelbase.config import Settings, resolve_settings
from travelbase.errors import DeserializationError
from travelbase.graphql import mutations, queries
from travelbase.graphql.client import GraphQLTransport
from travelbase.graphql.document import Operation
from travelbase.models import (
    Accommodation,
    AllotmentCollection,
    BookingConnection,
    Partner,
    RentalUnit,
    TripPricingCollection,
)
from travelbase.responses import (
    AccommodationResult,
    CreateOrReplaceAllotmentsResult,
    CreateOrReplaceTripPricingsResult,
    DeleteTripsResult,
    PartnerBookingsResult,
    PartnerResult,
    PartnersResult,
    RentalUnitResult,
    ResultT,
    parse_response,
)


class TravelbaseClient:
    """
    Partner API client. Each method performs exactly one request.

    Endpoint and api key are taken from the arguments, falling back to
    TRAVELBASE_GRAPHQL_ENDPOINT / TRAVELBASE_GRAPHQL_APIKEY. Resolution happens
    here, so a misconfigured client fails before any network call.
    """

    def __init__(
        self,
        endpoint: Optional[str] = None,
        api_key: Optional[str] = None,
        *,
        transport: Optional[GraphQLTransport] = None,
        timeout_s: int = 30,
    ) -> None:
        self.settings: Settings = resolve_settings(endpoint, api_key)
        self.transport = transport or GraphQLTransport(
            url=self.settings.endpoint,
            api_key=self.settings.api_key,
            timeout_s=timeout_s,
        )

    def close(self) -> None:
        self.transport.close()

    def __enter__(self) -> "TravelbaseClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def _run(self, operation: Operation, result_type: type[ResultT]) -> ResultT:
        body = self.transport.execute(operation)
        return parse_response(body, result_type)

    # ---- queries ----

    def get_partners(self) -> List[Partner]:
        return self._run(queries.partners_query(), PartnersResult).partners

    def get_partner(self, partner_id: int) -> Partner:
        return self._run(queries.partner_query(partner_id), PartnerResult).partner

    def get_accommodation(self, accommodation_id: int) -> Accommodation:
        return self._run(queries.accommodation_query(accommodation_id), AccommodationResult).accommodation

    def get_rental_unit(self, rental_unit_id: int) -> RentalUnit:
        return self._run(queries.rental_unit_query(rental_unit_id), RentalUnitResult).rental_unit

    def get_upcoming_bookings(
        self, partner_id: int, limit: int = queries.DEFAULT_LIMIT, cursor: Optional[str] = None
    ) -> BookingConnection:
        op = queries.upcoming_bookings_query(partner_id, limit, cursor)
        return self._connection(op, queries.UPCOMING_BOOKINGS)

    def get_recently_updated_bookings(
        self, partner_id: int, limit: int = queries.DEFAULT_LIMIT, cursor: Optional[str] = None
    ) -> BookingConnection:
        op = queries.recently_updated_bookings_query(partner_id, limit, cursor)
        return self._connection(op, queries.RECENTLY_UPDATED_BOOKINGS)

    def get_all_bookings(
        self,
        partner_id: int,
        limit: int = queries.DEFAULT_LIMIT,
        cursor: Optional[str] = None,
        start_date: Optional[dt.date] = None,
        end_date: Optional[dt.date] = None,
        search_query: Optional[str] = None,
        rental_unit_ids: Optional[Sequence[int]] = None,
    ) -> BookingConnection:
        op = queries.all_bookings_query(
            partner_id,
            limit=limit,
            cursor=cursor,
            start_date=start_date,
            end_date=end_date,
            search_query=search_query,
            rental_unit_ids=rental_unit_ids,
        )
        return self._connection(op, queries.ALL_BOOKINGS)

    def _connection(self, operation: Operation, connection: str) -> BookingConnection:
        partner = self._run(operation, PartnerBookingsResult).partner
        result = getattr(partner, to_snake(connection))
        if result is None:
            raise DeserializationError(f"{operation.name}: partner.{connection} missing from response")
        return result

    # ---- mutations ----

    def replace_allotments(self, rental_unit_id: int, allotments: AllotmentCollection) -> AllotmentCollection:
        op = mutations.replace_allotments_mutation(rental_unit_id, allotments)
        return self._run(op, CreateOrReplaceAllotmentsResult).create_or_replace_allotments

    def replace_trip_pricings(
        self, rental_unit_id: int, trip_pricings: TripPricingCollection
    ) -> TripPricingCollection:
        op = mutations.replace_trip_pricings_mutation(rental_unit_id, trip_pricings)
        return self._run(op, CreateOrReplaceTripPricingsResult).create_or_replace_trip_pricings

    def delete_trips(
        self,
        rental_unit_id: int,
        date: Optional[Union[dt.date, str]] = None,
        duration: Optional[int] = None,
    ) -> Optional[str]:
        """Delete trips for a rental unit, optionally narrowed to one date and/or duration."""
        op = mutations.delete_trips_mutation(rental_unit_id, date=date, duration=duration)
        return self._run(op, DeleteTripsResult).delete_trips.message

