from .journey import Journey
from .leg import Leg
from .route import Route
from .service import Service
from .station import Station
from .timetable import (
    Timetable,
    check_timetable,
    find_station,
    routes_by_station,
    stations_of,
)

__all__ = [
    "Journey",
    "Leg",
    "Route",
    "Service",
    "Station",
    "Timetable",
    "check_timetable",
    "find_station",
    "routes_by_station",
    "stations_of",
]
