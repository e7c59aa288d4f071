"""Client for the Dresden public transport (DVB/VVO) web API: stops, lines, departures and trips."""

__version__ = "1.0.0"