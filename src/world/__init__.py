# src/world/__init__.py
from .parcels import Parcel, ParcelSpec, ParcelGenerator
from .rng import RNG
from .state import VillageState, DEFAULT_START

__all__ = [
    "Parcel",
    "ParcelSpec",
    "ParcelGenerator",
    "RNG",
    "VillageState",
    "DEFAULT_START",
]
