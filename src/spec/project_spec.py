from dataclasses import dataclass, field
from typing import List, Dict, Optional, Any

from src.village.graph import RoadGraph
from src.village.routing import all_pairs_route_lengths
from src.world.parcels import ParcelSpec
from src.world.state import DEFAULT_START
from src.sim.policies import default_mail_route

ROBOT_NAMES = ("random", "route", "goal", "lazy")

@dataclass
class BenchmarkSpec:
    robots: List[str]
    trials: int = 100
    seeds: List[int] = field(default_factory=lambda: [7])
    parcel_counts: List[int] = field(default_factory=lambda: [5])

@dataclass
class VillageSpec:
    roads: List[str]
    mail_route: List[str]
    start: str = DEFAULT_START
    min_parcels: int = 5
    max_parcels: int = 5
    benchmark: Optional[BenchmarkSpec] = None
    notes: Optional[str] = None

    @staticmethod
    def from_dict(d: Dict[str, Any]) -> "VillageSpec":
        bench = d.get("benchmark")
        return VillageSpec(
            roads=list(d["roads"]),
            mail_route=list(d["mail_route"]),
            start=d.get("start", DEFAULT_START),
            min_parcels=int(d.get("min_parcels", 5)),
            max_parcels=int(d.get("max_parcels", 5)),
            benchmark=BenchmarkSpec(**bench) if bench else None,
            notes=d.get("notes"),
        )

    @staticmethod
    def default() -> "VillageSpec":
        """Configuración por código (no necesitas JSON)."""
        return VillageSpec.from_dict({
            "roads": RoadGraph.default_roads(),
            "mail_route": default_mail_route(),
            "start": DEFAULT_START,
            "min_parcels": 5,
            "max_parcels": 5,
            "benchmark": {
                "robots": ["route", "goal", "lazy"],
                "trials": 100,
                "seeds": [7, 11, 23],
                "parcel_counts": [5],
            },
            "notes": "Pueblo de Meadowfield: 11 lugares, 14 caminos",
        })

    # --------- derivados ---------
    def build_graph(self) -> RoadGraph:
        return RoadGraph.build(self.roads)

    def parcel_spec(self) -> ParcelSpec:
        return ParcelSpec(min_parcels=self.min_parcels, max_parcels=self.max_parcels)

    def validate(self) -> None:
        assert self.roads, "Faltan caminos"
        graph = self.build_graph()
        places = set(graph.places())
        assert len(places) >= 2, "Se necesitan al menos 2 lugares"
        assert graph.is_connected(), "El pueblo no es conexo (habría paquetes sin ruta)"
        assert self.start in places, f"start desconocido: {self.start}"
        assert 1 <= self.min_parcels <= self.max_parcels, "Rango de paquetes inválido"

        # el recorrido del cartero debe ser caminable y cíclico, y cubrir todo
        assert self.mail_route, "Falta mail_route"
        cycle = [self.mail_route[-1]] + self.mail_route
        for a, b in zip(cycle, cycle[1:]):
            assert a in places, f"mail_route pasa por un lugar desconocido: {a}"
            assert b in graph.neighbors(a), f"mail_route salta de {a} a {b} sin camino"
        assert set(self.mail_route) == places, "mail_route no visita todos los lugares"

        if self.benchmark is not None:
            assert self.benchmark.robots, "Definir robots a comparar"
            for r in self.benchmark.robots:
                assert r in ROBOT_NAMES, f"Robot desconocido: {r}"
            assert self.benchmark.trials > 0, "trials debe ser > 0"
            assert self.benchmark.seeds, "Definir al menos una semilla"
            assert all(n >= 1 for n in self.benchmark.parcel_counts), "parcel_counts debe ser ≥ 1"

    def summary(self) -> str:
        graph = self.build_graph()
        s = []
        s.append("=== CONFIGURACIÓN DEL PUEBLO ===")
        s.append(f"Lugares: {len(graph.places())}")
        s.append(f"Caminos: {len(list(graph.edges()))}")
        dist = all_pairs_route_lengths(graph)
        s.append(f"Diámetro: {max(max(d.values()) for d in dist.values())} caminos")
        s.append(f"Inicio del robot: {self.start}")
        s.append(f"Paquetes por tarea: {self.min_parcels}–{self.max_parcels}")
        if self.notes:
            s.append(f"Notas: {self.notes}")
        s.append("\nAdyacencias:")
        for p in graph.places():
            s.append(f"- {p} → {', '.join(graph.neighbors(p))}")
        s.append("\nRecorrido del cartero:")
        s.append(" → ".join(self.mail_route))
        if self.benchmark is not None:
            b = self.benchmark
            s.append("\nBenchmark:")
            s.append(f"- robots = {b.robots}")
            s.append(f"- trials = {b.trials}")
            s.append(f"- seeds = {b.seeds}")
            s.append(f"- parcel_counts = {b.parcel_counts}")
        return "\n".join(s)
