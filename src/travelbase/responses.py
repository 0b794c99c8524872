"""
One result type per API operation, plus the GraphQL response envelope they
arrive in. ``parse_response`` turns a raw body into the requested result or
raises ``DeserializationError``.
"""
from __future__ import annotations

import json
from typing import Any, Generic, List, Optional, Type, TypeVar

from pydantic import Field, ValidationError

from travelbase.errors import DeserializationError
from travelbase.models import (
    Accommodation,
    AllotmentCollection,
    Partner,
    PartnerBookings,
    RentalUnit,
    TravelbaseModel,
    TripPricingCollection,
)

ResultT = TypeVar("ResultT", bound=TravelbaseModel)


class PartnersResult(TravelbaseModel):
    partners: List[Partner]


class PartnerResult(TravelbaseModel):
    partner: Partner


class PartnerBookingsResult(TravelbaseModel):
    partner: PartnerBookings


class AccommodationResult(TravelbaseModel):
    accommodation: Accommodation


class RentalUnitResult(TravelbaseModel):
    rental_unit: RentalUnit


class CreateOrReplaceAllotmentsResult(TravelbaseModel):
    create_or_replace_allotments: AllotmentCollection


class CreateOrReplaceTripPricingsResult(TravelbaseModel):
    create_or_replace_trip_pricings: TripPricingCollection


class DeleteTripsPayload(TravelbaseModel):
    message: Optional[str] = None


class DeleteTripsResult(TravelbaseModel):
    delete_trips: DeleteTripsPayload


class GraphQLErrorDetail(TravelbaseModel):
    message: str
    path: Optional[List[Any]] = None


class ResponseEnvelope(TravelbaseModel, Generic[ResultT]):
    data: Optional[ResultT] = None
    errors: List[GraphQLErrorDetail] = Field(default_factory=list)


def _error_messages(raw: Any) -> List[str]:
    if not isinstance(raw, dict):
        return []
    errors = raw.get("errors") or []
    if not isinstance(errors, list):
        return []
    return [str(e.get("message", e)) if isinstance(e, dict) else str(e) for e in errors]


def parse_response(body: str, result_type: Type[ResultT]) -> ResultT:
    name = result_type.__name__
    try:
        raw = json.loads(body)
    except json.JSONDecodeError as exc:
        raise DeserializationError(f"{name}: response is not valid JSON ({exc})") from exc

    graphql_errors = _error_messages(raw)
    suffix = f"; GraphQL errors: {graphql_errors}" if graphql_errors else ""

    try:
        envelope = ResponseEnvelope[result_type].model_validate(raw)
    except ValidationError as exc:
        raise DeserializationError(
            f"{name}: response does not match the expected shape: {exc}{suffix}",
            graphql_errors=graphql_errors,
        ) from exc

    if envelope.data is None:
        raise DeserializationError(f"{name}: response has no data{suffix}", graphql_errors=graphql_errors)

    return envelope.data
