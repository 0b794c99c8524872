# Partner API write mutations
from __future__ import annotations

import datetime as dt
from typing import Any, Dict, Optional, Union

from travelbase.common.time import format_date
from travelbase.graphql.document import Field, Operation, Variable
from travelbase.models import AllotmentCollection, TripPricingCollection

ALLOTMENT_FIELDS = ("amount", "date")

# Canonical trip pricing selection; the optional prices come back as null when unset.
TRIP_PRICING_FIELDS = ("date", "duration", "price", "minimumStayPrice", "extraPersonPrice")

DELETE_TRIPS_FIELDS = ("message",)


def _input_mutation(operation_name: str, field_name: str, input_type: str, selections, payload: Dict[str, Any]) -> Operation:
    variable = Variable("input", input_type, required=True)
    root = Field.of(field_name, *selections, input=variable.ref)
    return Operation(
        "mutation",
        operation_name,
        root,
        variable_definitions=(variable,),
        variables={"input": payload},
    )


def replace_allotments_mutation(rental_unit_id: int, allotments: AllotmentCollection) -> Operation:
    payload = {"rentalUnitId": rental_unit_id, **allotments.to_payload()}
    return _input_mutation(
        "CreateOrReplaceAllotments",
        "createOrReplaceAllotments",
        "CreateOrReplaceAllotmentsInput",
        (Field.of("allotments", *ALLOTMENT_FIELDS),),
        payload,
    )


def replace_trip_pricings_mutation(rental_unit_id: int, trip_pricings: TripPricingCollection) -> Operation:
    payload = {"rentalUnitId": rental_unit_id, **trip_pricings.to_payload()}
    return _input_mutation(
        "CreateOrReplaceTripPricings",
        "createOrReplaceTripPricings",
        "CreateOrReplaceTripPricingsInput",
        (Field.of("tripPricings", *TRIP_PRICING_FIELDS),),
        payload,
    )


def delete_trips_mutation(
    rental_unit_id: int,
    date: Optional[Union[dt.date, str]] = None,
    duration: Optional[int] = None,
) -> Operation:
    payload: Dict[str, Any] = {"rentalUnitId": rental_unit_id}
    if date is not None:
        payload["date"] = format_date(date)
    if duration is not None:
        payload["duration"] = duration
    return _input_mutation("DeleteTrips", "deleteTrips", "DeleteTripsInput", DELETE_TRIPS_FIELDS, payload)
