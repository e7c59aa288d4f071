# dvbclient

A small client for the Dresden public transport web API (DVB / VVO). With it you can:

- search stops and places by name (`Client.get_point`),
- list the lines that serve a stop (`Client.get_lines`),
- show upcoming departures or arrivals at a stop (`Client.monitor_stop`),
- plan journeys between two places (`Client.get_route`).

## Installation

```
pip install dvbclient
```

## Usage

```python
from dvbclient.client import Client
from dvbclient.lines import GetLinesParams
from dvbclient.monitor import MonitorStopParams
from dvbclient.point import GetPointParams
from dvbclient.route import GetRouteParams

with Client() as client:
    found = client.get_point(GetPointParams(query="Hauptbahnhof", limit=5))
    for point in found.points:
        print(point)

    board = client.monitor_stop(MonitorStopParams(stop_id="33000028", limit=10))
    print(board.name, board.place)
    for dep in board.departures:
        print(dep.line_name, dep.direction, dep.real_time, dep.state)

    lines = client.get_lines(GetLinesParams(stop_id="33000028"))
    for line in lines.lines:
        print(line.name, [d.name for d in line.directions])

    trips = client.get_route(GetRouteParams(origin="33000742", destination="33000037"))
    for route in trips.routes:
        print(route.duration, route.interchanges, route.price)
```

### Parameters

Each endpoint takes a parameter dataclass whose `to_query()` builds the query
string:

| Module              | Class               | Required                 | Optional                                                              |
|---------------------|---------------------|--------------------------|-----------------------------------------------------------------------|
| `dvbclient.point`   | `GetPointParams`    | `query`                  | `format`, `stops_only`, `assigned_stops`, `limit`, `dvb`              |
| `dvbclient.lines`   | `GetLinesParams`    | `stop_id`                | `format`                                                              |
| `dvbclient.monitor` | `MonitorStopParams` | `stop_id`                | `format`, `time`, `is_arrival`, `limit`, `short_term_changes`, `mentz_only` |
| `dvbclient.route`   | `GetRouteParams`    | `origin`, `destination`  | `format`, `is_arrival_time`, `short_term_changes`, `time`, `via`      |

Optional values left as `None` (or empty strings, or a `limit` that is not
positive) are not sent. Boolean options are sent as `true` / `false`. An empty
required value raises `ValueError` before any request is made. Calling an
endpoint method with no parameters at all sends the request without a query.

### Responses

Responses are dataclasses built with `from_dict` from the JSON the API
returns, with snake_case fields: `GetPointResponse`, `GetLinesResponse`
(with `Line`, `Direction`, `TimeTable`), `MonitorStopResponse` (with
`Departure`) and `GetRouteResponse` (with `Route`, `MotChain`,
`PartialRoute`, `Mot`, `RegularStop`, `Ticket`). Shared pieces live in
`dvbclient.types`: `Status`, `Diva` and `Platform`. Missing fields take
empty defaults; fields the API may leave out, such as most of `Mot`, are
`None`.

### Client settings

By default the client talks to `https://webapi.vvo-online.de`, sends the user
agent `dvbclient/1.0.0` and gives up on a request after 30 seconds. These can be
changed with `Client(base_url=..., user_agent=..., timeout=...)`. An existing
`requests.Session` can be passed as `session=`; the client then leaves closing
it to the caller, otherwise `close()` (or leaving the `with` block) closes the
session the client created.

`Client.request(method, path, query=None, body=None, headers=None)` sends an
arbitrary request and returns the raw `requests.Response`; a `body` is sent as
JSON.

### Errors

All errors derive from `dvbclient.errors.DvbError`. A response with a non-2xx
status raises `dvbclient.errors.ApiError`, which carries the HTTP
`status_code` and a `message` (taken from a JSON `message` field when the
error body has one, otherwise the raw body). Network failures and responses
that are not a JSON object raise `DvbError`.

## Example program

The package ships a demonstration that queries the live API and prints
departures and lines at Dresden Hauptbahnhof, a journey between two stops and
a point search:

```
dvbclient-example
```

If the departure query fails the program exits with the error; failures of
the other queries are logged and the program moves on.

## Running the tests

```
pip install "dvbclient[test]"
pytest
```