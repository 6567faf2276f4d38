# src/world/state.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterable, Optional, Tuple

from src.village.graph import RoadGraph, Place
from .parcels import Parcel, ParcelSpec, ParcelGenerator
from .rng import RNG

DEFAULT_START: Place = "Post Office"


@dataclass(frozen=True)
class VillageState:
    """
    Foto inmutable del mundo: dónde está el robot y dónde están los paquetes.
    move() nunca modifica la instancia; devuelve otra (o la misma si el
    movimiento no es válido). La igualdad compara sólo (place, parcels).
    """
    graph: RoadGraph = field(compare=False, repr=False)
    place: Place
    parcels: Tuple[Parcel, ...] = ()

    def __post_init__(self):
        # acepta listas u otros iterables pero guarda siempre una tupla,
        # sin paquetes que ya están en su dirección
        kept = tuple(p for p in self.parcels if p.place != p.address)
        object.__setattr__(self, "parcels", kept)

    @classmethod
    def random(
        cls,
        graph: RoadGraph,
        rng: RNG,
        spec: Optional[ParcelSpec] = None,
        start: Place = DEFAULT_START,
    ) -> "VillageState":
        """Tarea aleatoria: paquetes con origen != destino; el robot arranca en start."""
        gen = ParcelGenerator(graph=graph, rng=rng, spec=spec)
        return cls(graph, start, tuple(gen.make_parcels()))

    @property
    def done(self) -> bool:
        return not self.parcels

    def carried(self) -> Tuple[Parcel, ...]:
        """Paquetes en el lugar del robot (los que se lleva al moverse)."""
        return tuple(p for p in self.parcels if p.place == self.place)

    def move(self, destination: Place) -> "VillageState":
        if destination not in self.graph.neighbors(self.place):
            return self  # movimiento inválido: se pierde el turno
        parcels: Iterable[Parcel] = (
            p if p.place != self.place else Parcel(place=destination, address=p.address)
            for p in self.parcels
        )
        # entrega instantánea de lo que llegó a su dirección
        kept = tuple(p for p in parcels if p.place != p.address)
        return VillageState(self.graph, destination, kept)
