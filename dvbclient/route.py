"""Trip planning between two locations."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from .types import (
    Diva,
    Platform,
    Status,
    _fields,
    _flag,
    _number,
    _optional_text,
    _strings,
    _text,
)


def _optional_number(data: Mapping[str, Any], key: str) -> Optional[int]:
    value = data.get(key)
    return None if value is None else int(value)


def _optional_bool(data: Mapping[str, Any], key: str) -> Optional[bool]:
    value = data.get(key)
    return None if value is None else bool(value)


@dataclass
class GetRouteParams:
    """Parameters for planning a journey from origin to destination."""

    origin: str
    destination: str
    format: Optional[str] = None
    is_arrival_time: Optional[bool] = None
    short_term_changes: Optional[bool] = None
    time: Optional[str] = None
    via: Optional[str] = None

    def to_query(self) -> dict[str, str]:
        """Build the query string parameters, validating origin and destination."""
        if not self.origin:
            raise ValueError("origin can not be empty")
        if not self.destination:
            raise ValueError("destination can not be empty")
        query = {"origin": self.origin, "destination": self.destination}
        if self.format:
            query["format"] = self.format
        if self.is_arrival_time is not None:
            query["isarrivaltime"] = _flag(self.is_arrival_time)
        if self.short_term_changes is not None:
            query["shorttermchanges"] = _flag(self.short_term_changes)
        if self.time:
            query["time"] = self.time
        if self.via:
            query["via"] = self.via
        return query


@dataclass
class MotChain:
    """Summary of one mode of transport used along a route."""

    dl_id: str = ""
    stateless_id: str = ""
    type: str = ""
    name: str = ""
    direction: str = ""
    changes: list[str] = field(default_factory=list)
    diva: Diva = field(default_factory=Diva)
    transportation_company: str = ""
    operator_code: str = ""
    product_name: str = ""
    train_number: str = ""

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "MotChain":
        data = _fields(data)
        return cls(
            dl_id=_text(data, "DlId"),
            stateless_id=_text(data, "StatelessId"),
            type=_text(data, "Type"),
            name=_text(data, "Name"),
            direction=_text(data, "Direction"),
            changes=_strings(data, "Changes"),
            diva=Diva.from_dict(data.get("Diva")),
            transportation_company=_text(data, "TransportationCompany"),
            operator_code=_text(data, "OperatorCode"),
            product_name=_text(data, "ProductName"),
            train_number=_text(data, "TrainNumber"),
        )


@dataclass
class Mot:
    """Detailed mode of transport of one route segment."""

    type: str = ""
    dl_id: Optional[str] = None
    stateless_id: Optional[str] = None
    name: Optional[str] = None
    direction: Optional[str] = None
    changes: list[str] = field(default_factory=list)
    diva: Optional[Diva] = None
    transportation_company: Optional[str] = None
    operator_code: Optional[str] = None
    product_name: Optional[str] = None
    train_number: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "Mot":
        data = _fields(data)
        diva = data.get("Diva")
        return cls(
            type=_text(data, "Type"),
            dl_id=_optional_text(data, "DlId"),
            stateless_id=_optional_text(data, "StatelessId"),
            name=_optional_text(data, "Name"),
            direction=_optional_text(data, "Direction"),
            changes=_strings(data, "Changes"),
            diva=None if diva is None else Diva.from_dict(diva),
            transportation_company=_optional_text(data, "TransportationCompany"),
            operator_code=_optional_text(data, "OperatorCode"),
            product_name=_optional_text(data, "ProductName"),
            train_number=_optional_text(data, "TrainNumber"),
        )


@dataclass
class RegularStop:
    """A stop visited during a route segment."""

    arrival_time: str = ""
    departure_time: str = ""
    arrival_real_time: Optional[str] = None
    departure_real_time: Optional[str] = None
    place: str = ""
    name: str = ""
    type: str = ""
    data_id: str = ""
    dh_id: str = ""
    platform: Platform = field(default_factory=Platform)
    latitude: int = 0
    longitude: int = 0
    departure_state: Optional[str] = None
    arrival_state: Optional[str] = None
    cancel_reasons: list[str] = field(default_factory=list)
    park_and_rail: list[str] = field(default_factory=list)
    occupancy: str = ""

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "RegularStop":
        data = _fields(data)
        return cls(
            arrival_time=_text(data, "ArrivalTime"),
            departure_time=_text(data, "DepartureTime"),
            arrival_real_time=_optional_text(data, "ArrivalRealTime"),
            departure_real_time=_optional_text(data, "DepartureRealTime"),
            place=_text(data, "Place"),
            name=_text(data, "Name"),
            type=_text(data, "Type"),
            data_id=_text(data, "DataId"),
            dh_id=_text(data, "DhId"),
            platform=Platform.from_dict(data.get("Platform")),
            latitude=_number(data, "Latitude"),
            longitude=_number(data, "Longitude"),
            departure_state=_optional_text(data, "DepartureState"),
            arrival_state=_optional_text(data, "ArrivalState"),
            cancel_reasons=_strings(data, "CancelReasons"),
            park_and_rail=_strings(data, "ParkAndRail"),
            occupancy=_text(data, "Occupancy"),
        )


@dataclass
class PartialRoute:
    """One segment of a journey: a ride, a walk or a transfer."""

    partial_route_id: Optional[int] = None
    duration: int = 0
    mot: Mot = field(default_factory=Mot)
    map_data_index: Optional[int] = None
    shift: str = ""
    regular_stops: list[RegularStop] = field(default_factory=list)
    changeover_endangered: Optional[bool] = None
    next_departure_times: list[str] = field(default_factory=list)
    previous_departure_times: list[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "PartialRoute":
        data = _fields(data)
        return cls(
            partial_route_id=_optional_number(data, "PartialRouteId"),
            duration=_number(data, "Duration"),
            mot=Mot.from_dict(data.get("Mot")),
            map_data_index=_optional_number(data, "MapDataIndex"),
            shift=_text(data, "Shift"),
            regular_stops=[
                RegularStop.from_dict(item) for item in data.get("RegularStops") or []
            ],
            changeover_endangered=_optional_bool(data, "ChangeoverEndangered"),
            next_departure_times=_strings(data, "NextDepartureTimes"),
            previous_departure_times=_strings(data, "PreviousDepartureTimes"),
        )


@dataclass
class Ticket:
    """A ticket option for a journey."""

    name: str = ""
    price_level: int = 0
    price: str = ""
    number_of_fare_zones: str = ""
    fare_zone_names: str = ""

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "Ticket":
        data = _fields(data)
        return cls(
            name=_text(data, "Name"),
            price_level=_number(data, "PriceLevel"),
            price=_text(data, "Price"),
            number_of_fare_zones=_text(data, "NumberOfFareZones"),
            fare_zone_names=_text(data, "FareZoneNames"),
        )


@dataclass
class Route:
    """A single journey option from origin to destination."""

    price_level: int = 0
    price: str = ""
    price_day_ticket: str = ""
    net: str = ""
    duration: int = 0
    interchanges: int = 0
    mot_chain: list[MotChain] = field(default_factory=list)
    number_of_fare_zones: str = ""
    number_of_fare_zones_day_ticket: str = ""
    fare_zone_names: str = ""
    fare_zone_names_day_ticket: str = ""
    fare_zone_origin: int = 0
    fare_zone_destination: int = 0
    route_id: int = 0
    partial_routes: list[PartialRoute] = field(default_factory=list)
    map_data: list[str] = field(default_factory=list)
    tickets: list[Ticket] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "Route":
        data = _fields(data)
        return cls(
            price_level=_number(data, "PriceLevel"),
            price=_text(data, "Price"),
            price_day_ticket=_text(data, "PriceDayTicket"),
            net=_text(data, "Net"),
            duration=_number(data, "Duration"),
            interchanges=_number(data, "Interchanges"),
            mot_chain=[MotChain.from_dict(item) for item in data.get("MotChain") or []],
            number_of_fare_zones=_text(data, "NumberOfFareZones"),
            number_of_fare_zones_day_ticket=_text(data, "NumberOfFareZonesDayTicket"),
            fare_zone_names=_text(data, "FareZoneNames"),
            fare_zone_names_day_ticket=_text(data, "FareZoneNamesDayTicket"),
            fare_zone_origin=_number(data, "FareZoneOrigin"),
            fare_zone_destination=_number(data, "FareZoneDestination"),
            route_id=_number(data, "RouteId"),
            partial_routes=[
                PartialRoute.from_dict(item) for item in data.get("PartialRoutes") or []
            ],
            map_data=_strings(data, "MapData"),
            tickets=[Ticket.from_dict(item) for item in data.get("Tickets") or []],
        )


@dataclass
class GetRouteResponse:
    """Response of the trip planning endpoint."""

    session_id: str = ""
    status: Status = field(default_factory=Status)
    routes: list[Route] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "GetRouteResponse":
        data = _fields(data)
        return cls(
            session_id=_text(data, "SessionId"),
            status=Status.from_dict(data.get("Status")),
            routes=[Route.from_dict(item) for item in data.get("Routes") or []],
        )