"""Real-time departures and arrivals at a stop."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from .types import Diva, Platform, Status, _fields, _flag, _strings, _text


@dataclass
class MonitorStopParams:
    """Parameters for monitoring the departures of a stop."""

    stop_id: str
    format: Optional[str] = None
    time: Optional[str] = None
    is_arrival: Optional[bool] = None
    limit: Optional[int] = None
    short_term_changes: Optional[bool] = None
    mentz_only: Optional[bool] = None

    def to_query(self) -> dict[str, str]:
        """Build the query string parameters, validating the stop id."""
        if not self.stop_id:
            raise ValueError("stopid can not be empty")
        query = {"stopid": self.stop_id}
        if self.format:
            query["format"] = self.format
        if self.time:
            query["time"] = self.time
        if self.is_arrival is not None:
            query["isarrival"] = _flag(self.is_arrival)
        if self.limit is not None and self.limit > 0:
            query["limit"] = str(self.limit)
        if self.short_term_changes is not None:
            query["shorttermchanges"] = _flag(self.short_term_changes)
        if self.mentz_only is not None:
            query["mentzonly"] = _flag(self.mentz_only)
        return query


@dataclass
class Departure:
    """A single departure or arrival at a monitored stop."""

    id: str = ""
    dl_id: str = ""
    line_name: str = ""
    direction: str = ""
    platform: Platform = field(default_factory=Platform)
    mot: str = ""
    real_time: str = ""
    scheduled_time: str = ""
    state: str = ""
    route_changes: list[str] = field(default_factory=list)
    diva: Diva = field(default_factory=Diva)
    cancel_reasons: list[str] = field(default_factory=list)
    occupancy: str = ""

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "Departure":
        data = _fields(data)
        return cls(
            id=_text(data, "Id"),
            dl_id=_text(data, "DlId"),
            line_name=_text(data, "LineName"),
            direction=_text(data, "Direction"),
            platform=Platform.from_dict(data.get("Platform")),
            mot=_text(data, "Mot"),
            real_time=_text(data, "RealTime"),
            scheduled_time=_text(data, "ScheduledTime"),
            state=_text(data, "State"),
            route_changes=_strings(data, "RouteChanges"),
            diva=Diva.from_dict(data.get("Diva")),
            cancel_reasons=_strings(data, "CancelReasons"),
            occupancy=_text(data, "Occupancy"),
        )


@dataclass
class MonitorStopResponse:
    """Response of the departure monitor endpoint."""

    name: str = ""
    status: Status = field(default_factory=Status)
    place: str = ""
    expiration_time: str = ""
    departures: list[Departure] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "MonitorStopResponse":
        data = _fields(data)
        return cls(
            name=_text(data, "Name"),
            status=Status.from_dict(data.get("Status")),
            place=_text(data, "Place"),
            expiration_time=_text(data, "ExpirationTime"),
            departures=[Departure.from_dict(item) for item in data.get("Departures") or []],
        )