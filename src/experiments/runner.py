from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, List, Optional, Sequence
import csv

from src.village.graph import RoadGraph, Place
from src.world.rng import RNG
from src.world.parcels import ParcelSpec
from src.world.state import VillageState, DEFAULT_START
from src.sim.policies import Robot, make_robot
from src.sim.engine import count_steps
from src.experiments.kpis import FIELDNAMES, mean_steps, to_row

@dataclass
class CompareResult:
    mean_a: float
    mean_b: float
    steps_a: List[int] = field(default_factory=list)
    steps_b: List[int] = field(default_factory=list)

    @property
    def trials(self) -> int:
        return len(self.steps_a)

def compare_robots(
    graph: RoadGraph,
    robot_a: Robot,
    memory_a: Any,
    robot_b: Robot,
    memory_b: Any,
    trials: int = 100,
    rng: Optional[RNG] = None,
    parcel_spec: Optional[ParcelSpec] = None,
    start: Place = DEFAULT_START,
) -> CompareResult:
    """
    Cara a cara justo: en cada prueba se genera UNA tarea aleatoria y ambos
    robots la resuelven desde el mismo estado (inmutable, se reutiliza tal cual).
    """
    if trials <= 0:
        raise ValueError("trials debe ser > 0")
    rng = rng or RNG()
    steps_a: List[int] = []
    steps_b: List[int] = []
    for _ in range(trials):
        state = VillageState.random(graph, rng, parcel_spec, start)
        steps_a.append(count_steps(state, robot_a, memory_a))
        steps_b.append(count_steps(state, robot_b, memory_b))
    return CompareResult(
        mean_a=mean_steps(steps_a),
        mean_b=mean_steps(steps_b),
        steps_a=steps_a,
        steps_b=steps_b,
    )

def run_benchmark(
    out_csv: Path,
    graph: Optional[RoadGraph] = None,
    # dominio de escenarios
    robots: Sequence[str] = ("route", "goal", "lazy"),
    parcel_counts: Sequence[int] = (5,),
    seeds: Sequence[int] = (7, 11, 23),
    trials: int = 100,
    # parámetros comunes del entorno
    mail_route: Optional[Sequence[Place]] = None,
    start: Place = DEFAULT_START,
) -> Path:
    """
    Corre todos los robots sobre las mismas tareas por (seed, parcel_count) y
    escribe una fila por (robot, prueba).
    """
    graph = graph or RoadGraph.default()
    out_csv.parent.mkdir(parents=True, exist_ok=True)
    with out_csv.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=FIELDNAMES)
        w.writeheader()

        for seed in seeds:
            for n in parcel_counts:
                # tareas primero, para que todos los robots vean exactamente las mismas
                task_rng = RNG(seed=seed)
                spec = ParcelSpec(min_parcels=n, max_parcels=n)
                states = [VillageState.random(graph, task_rng, spec, start) for _ in range(trials)]

                for name in robots:
                    # el robot aleatorio usa su propio flujo, separado del de las tareas
                    robot = make_robot(name, graph, rng=RNG(seed=seed + 1), mail_route=mail_route)
                    for trial, state in enumerate(states):
                        steps = count_steps(state, robot, robot.initial_memory())
                        row = to_row(name, seed, n, trial, len(state.parcels), steps)
                        w.writerow(row.to_dict())
    return out_csv
