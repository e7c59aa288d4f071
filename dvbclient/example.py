"""Demonstration command that queries every endpoint of the API."""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from .client import Client
from .errors import DvbError
from .lines import GetLinesParams
from .monitor import MonitorStopParams
from .point import GetPointParams
from .route import GetRouteParams

_log = logging.getLogger(__name__)

HAUPTBAHNHOF_STOP_ID = "33000028"


def monitor_stop_example(client: Client) -> None:
    """Print upcoming departures at Dresden Hauptbahnhof.

    Exits the program if the request fails.
    """
    print("=== Dresden Transport Monitor Example ===")
    print()

    stop_id = HAUPTBAHNHOF_STOP_ID
    params = MonitorStopParams(stop_id=stop_id, limit=10)

    print(f"Fetching departures for stop ID: {stop_id}")
    print("---")

    try:
        response = client.monitor_stop(params)
    except DvbError as exc:
        raise SystemExit(f"Error fetching stop information: {exc}") from exc

    print(f"Stop: {response.name}")
    print(f"Place: {response.place}")
    print(f"Status: {response.status.code} - {response.status.message}")
    print(f"Expiration Time: {response.expiration_time}")
    print()

    if not response.departures:
        print("No departures found.")
        return

    print(f"Found {len(response.departures)} departures:")
    print("---")
    for number, departure in enumerate(response.departures, start=1):
        print(f"{number}. Line {departure.line_name} → {departure.direction}")
        print(f"   Platform: {departure.platform.name} ({departure.platform.type})")
        print(f"   Scheduled: {departure.scheduled_time}")
        print(f"   Real-time: {departure.real_time}")
        print(f"   State: {departure.state}")
        if departure.occupancy:
            print(f"   Occupancy: {departure.occupancy}")
        if departure.route_changes:
            print(f"   Route Changes: [{' '.join(departure.route_changes)}]")
        print()


def get_lines_example(client: Client) -> None:
    """Print the lines serving Dresden Hauptbahnhof."""
    print("\n=== Available Lines Example ===")
    print()

    stop_id = HAUPTBAHNHOF_STOP_ID
    params = GetLinesParams(stop_id=stop_id)

    print(f"Fetching available lines for stop ID: {stop_id}")
    print("---")

    try:
        response = client.get_lines(params)
    except DvbError as exc:
        _log.error("Error fetching lines: %s", exc)
        return

    print(f"Status: {response.status.code} - {response.status.message}")
    print(f"Expiration Time: {response.expiration_time}")
    print()

    if not response.lines:
        print("No lines found.")
        return

    print(f"Found {len(response.lines)} available lines:")
    print("---")
    for number, line in enumerate(response.lines, start=1):
        print(f"{number}. Line {line.name}")
        if line.directions:
            names = ", ".join(direction.name for direction in line.directions)
            print(f"   Directions: {names}")
        if line.diva.number:
            print(f"   Number: {line.diva.number}")
        print()


def get_route_example(client: Client) -> None:
    """Print journey options between two fixed stops."""
    print("\n=== Route Planning Example ===")
    print()

    origin = "33000742"
    destination = "33000037"
    params = GetRouteParams(origin=origin, destination=destination)

    print(f"Finding route from '{origin}' to '{destination}'")
    print("---")

    try:
        response = client.get_route(params)
    except DvbError as exc:
        _log.error("Error fetching route: %s", exc)
        return

    print(f"Status: {response.status.code} - {response.status.message}")
    print(f"Session ID: {response.session_id}")
    print()

    if not response.routes:
        print("No routes found.")
        return

    print(f"Found {len(response.routes)} route(s):")
    print("---")
    for number, route in enumerate(response.routes, start=1):
        print(
            f"{number}. Route {route.route_id} "
            f"(Duration: {route.duration} min, Interchanges: {route.interchanges})"
        )
        print(f"   Price: {route.price} (Day ticket: {route.price_day_ticket})")
        print(f"   Fare zones: {route.fare_zone_names}")

        if route.partial_routes:
            print("   Route segments:")
            for index, partial in enumerate(route.partial_routes, start=1):
                segment = f"     {index}. {partial.mot.type}"
                if partial.mot.name:
                    segment += f" {partial.mot.name}"
                if partial.mot.direction:
                    segment += f" → {partial.mot.direction}"
                print(f"{segment} ({partial.duration} min)")
        print()


def get_point_example(client: Client) -> None:
    """Print the point finder results for Dresden Hauptbahnhof."""
    print("\n=== Point Search Example ===")
    print()

    query = "Dresden Hauptbahnhof"
    params = GetPointParams(query=query, limit=1)

    print(f"Searching for points matching: {query}")
    print("---")

    try:
        response = client.get_point(params)
    except DvbError as exc:
        _log.error("Error fetching point information: %s", exc)
        return

    print(f"Status: {response.status.code} - {response.status.message}")
    print(f"Point Status: {response.point_status}")
    print(f"Expiration Time: {response.expiration_time}")
    print()

    if not response.points:
        print("No points found.")
    else:
        print(f"Found {len(response.points)} point(s):")
        print("---")
        for number, point in enumerate(response.points, start=1):
            print(f"{number}. {point}")
    print()


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Run every example against the public API."""
    with Client() as client:
        monitor_stop_example(client)
        get_lines_example(client)
        get_route_example(client)
        get_point_example(client)
    print("=== All examples completed ===")


if __name__ == "__main__":
    main()