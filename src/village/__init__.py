# src/village/__init__.py
from .graph import Place, RoadGraph, UnknownPlaceError
from .routing import NoRouteError, Route, find_route, route_length, all_pairs_route_lengths

__all__ = [
    "Place",
    "RoadGraph",
    "UnknownPlaceError",
    "NoRouteError",
    "Route",
    "find_route",
    "route_length",
    "all_pairs_route_lengths",
]
