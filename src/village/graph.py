# src/village/graph.py
from __future__ import annotations
from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Sequence, Set, Tuple, Union
from collections import deque

Place = str                                   # etiqueta opaca de un lugar del pueblo
RoadSpec = Union[str, Sequence[str]]          # "A-B" o ("A", "B")


class UnknownPlaceError(LookupError):
    """Se consultó un lugar que no existe en el grafo (configuración mal formada)."""

    def __init__(self, place: Place):
        super().__init__(f"Lugar desconocido: {place!r}")
        self.place = place


def _parse_road(road: RoadSpec) -> Tuple[Place, Place]:
    if isinstance(road, str):
        parts = road.split("-")
    else:
        parts = list(road)
    if len(parts) != 2:
        raise ValueError(f"Camino mal formado: {road!r} (se espera 'A-B')")
    a, b = (str(p).strip() for p in parts)
    if not a or not b:
        raise ValueError(f"Camino mal formado: {road!r} (lugar vacío)")
    return a, b


@dataclass(frozen=True)
class RoadGraph:
    """
    Red de caminos no dirigida del pueblo como lista de adyacencia:

    adjacency = {
        "Alice's House": ("Bob's House", "Cabin", "Post Office"),
        "Bob's House":   ("Alice's House", "Town Hall"),
        ...
    }

    El orden de cada tupla es el orden de inserción de la lista de caminos
    (importa para el desempate del BFS). No se modifica tras construirse.
    """
    adjacency: Mapping[Place, Tuple[Place, ...]]

    # --------- constructores ---------
    @staticmethod
    def default_roads() -> List[str]:
        return [
            "Alice's House-Bob's House",
            "Alice's House-Cabin",
            "Alice's House-Post Office",
            "Bob's House-Town Hall",
            "Daria's House-Ernie's House",
            "Daria's House-Town Hall",
            "Ernie's House-Grete's House",
            "Grete's House-Farm",
            "Grete's House-Shop",
            "Marketplace-Farm",
            "Marketplace-Post Office",
            "Marketplace-Shop",
            "Marketplace-Town Hall",
            "Shop-Town Hall",
        ]

    @classmethod
    def build(cls, roads: Iterable[RoadSpec]) -> "RoadGraph":
        adj: Dict[Place, List[Place]] = {}
        for road in roads:
            a, b = _parse_road(road)
            # los caminos son de doble sentido
            adj.setdefault(a, []).append(b)
            adj.setdefault(b, []).append(a)
        return cls(MappingProxyType({p: tuple(ns) for p, ns in adj.items()}))

    @classmethod
    def default(cls) -> "RoadGraph":
        return cls.build(cls.default_roads())

    # --------- API de grafo ---------
    def __contains__(self, place: object) -> bool:
        return place in self.adjacency

    def neighbors(self, place: Place) -> Tuple[Place, ...]:
        try:
            return self.adjacency[place]
        except KeyError:
            raise UnknownPlaceError(place) from None

    def places(self) -> List[Place]:
        return list(self.adjacency.keys())

    def edges(self) -> Iterable[Tuple[Place, Place]]:
        seen: Set[Tuple[Place, Place]] = set()
        for u, ns in self.adjacency.items():
            for v in ns:
                e = tuple(sorted((u, v)))
                if e not in seen:
                    seen.add(e)
                    yield e

    def is_connected(self) -> bool:
        places = self.places()
        if not places:
            return True
        start = places[0]
        seen = {start}
        q = deque([start])
        while q:
            u = q.popleft()
            for v in self.adjacency[u]:
                if v not in seen:
                    seen.add(v)
                    q.append(v)
        return len(seen) == len(places)
