from dataclasses import dataclass
from typing import List, Optional
from src.village.graph import RoadGraph, Place
from .rng import RNG

@dataclass(frozen=True)
class Parcel:
    place: Place     # dónde está ahora el paquete
    address: Place   # a dónde hay que entregarlo

@dataclass
class ParcelSpec:
    """Reglas para la cantidad de paquetes de una tarea aleatoria."""
    min_parcels: int = 5
    max_parcels: int = 5

@dataclass
class ParcelGenerator:
    graph: RoadGraph
    rng: RNG
    spec: Optional[ParcelSpec] = None

    def __post_init__(self):
        if self.spec is None:
            self.spec = ParcelSpec()

    def _draw_count(self) -> int:
        a, b = self.spec.min_parcels, self.spec.max_parcels
        if not 1 <= a <= b:
            raise ValueError(f"Rango de paquetes inválido: {a}..{b}")
        # cantidad uniforme discreta entre a y b
        return int(self.rng.integers(a, b + 1))

    def make_parcel(self) -> Parcel:
        places = self.graph.places()
        if len(places) < 2:
            raise ValueError("Se necesitan al menos 2 lugares para generar paquetes")
        address = self.rng.pick(places)
        place = self.rng.pick(places)
        # un paquete no puede nacer ya entregado
        while place == address:
            place = self.rng.pick(places)
        return Parcel(place=place, address=address)

    def make_parcels(self) -> List[Parcel]:
        return [self.make_parcel() for _ in range(self._draw_count())]
