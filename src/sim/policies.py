from dataclasses import dataclass
from typing import Any, List, Literal, Optional, Sequence
from src.village.graph import RoadGraph, Place
from src.village.routing import Route, find_route
from src.world.state import VillageState
from src.world.rng import RNG

RobotName = Literal["random", "route", "goal", "lazy"]

@dataclass(frozen=True)
class Decision:
    """Lo que el robot decide en un turno: a dónde ir y qué recordar."""
    direction: Place
    memory: Any = ()


def default_mail_route() -> List[Place]:
    """Recorrido cíclico del cartero: pasa por todos los lugares del pueblo."""
    return [
        "Alice's House",
        "Cabin",
        "Alice's House",
        "Bob's House",
        "Town Hall",
        "Daria's House",
        "Ernie's House",
        "Grete's House",
        "Shop",
        "Grete's House",
        "Farm",
        "Marketplace",
        "Post Office",
    ]


class Robot:
    """Estrategia de decisión. La memoria es opaca y la hila el simulador."""
    name: str = "robot"

    def initial_memory(self) -> Any:
        return []

    def decide(self, state: VillageState, memory: Any) -> Decision:
        raise NotImplementedError


class RandomRobot(Robot):
    name = "random"

    def __init__(self, graph: RoadGraph, rng: Optional[RNG] = None):
        self.graph = graph
        self.rng = rng or RNG()

    def decide(self, state: VillageState, memory: Any) -> Decision:
        return Decision(direction=self.rng.pick(self.graph.neighbors(state.place)), memory=memory)


class RouteRobot(Robot):
    name = "route"

    def __init__(self, mail_route: Optional[Sequence[Place]] = None):
        self.mail_route = list(mail_route) if mail_route is not None else default_mail_route()
        if not self.mail_route:
            raise ValueError("mail_route vacío")

    def decide(self, state: VillageState, memory: Sequence[Place]) -> Decision:
        # terminado el recorrido, se empieza de nuevo
        if len(memory) == 0:
            memory = self.mail_route
        return Decision(direction=memory[0], memory=list(memory[1:]))


class GoalOrientedRobot(Robot):
    """Va por el primer paquete de la lista; si ya lo lleva, lo entrega."""
    name = "goal"

    def __init__(self, graph: RoadGraph):
        self.graph = graph

    def decide(self, state: VillageState, memory: Route) -> Decision:
        route = memory
        if len(route) == 0:
            parcel = state.parcels[0]
            if parcel.place != state.place:
                route = find_route(self.graph, state.place, parcel.place)
            else:
                route = find_route(self.graph, state.place, parcel.address)
        return Decision(direction=route[0], memory=list(route[1:]))


@dataclass(frozen=True)
class Candidate:
    route: Route
    pick_up: bool

    @property
    def score(self) -> float:
        # rutas cortas primero; +0.5 a recoger (conviene cargar varios paquetes)
        return (0.5 if self.pick_up else 0.0) - len(self.route)


class LazyRobot(Robot):
    """
    Greedy con puntaje: evalúa la ruta relevante de cada paquete (recoger si no
    lo lleva, entregar si sí) y se queda con la de mayor puntaje. En empate gana
    el paquete que aparece primero.
    """
    name = "lazy"

    def __init__(self, graph: RoadGraph):
        self.graph = graph

    def candidates(self, state: VillageState) -> List[Candidate]:
        out: List[Candidate] = []
        for parcel in state.parcels:
            if parcel.place != state.place:
                out.append(Candidate(find_route(self.graph, state.place, parcel.place), pick_up=True))
            else:
                out.append(Candidate(find_route(self.graph, state.place, parcel.address), pick_up=False))
        return out

    def decide(self, state: VillageState, memory: Route) -> Decision:
        route = memory
        if len(route) == 0:
            best = None
            for c in self.candidates(state):
                if best is None or c.score > best.score:
                    best = c
            route = best.route
        return Decision(direction=route[0], memory=list(route[1:]))


def make_robot(
    name: str,
    graph: RoadGraph,
    rng: Optional[RNG] = None,
    mail_route: Optional[Sequence[Place]] = None,
) -> Robot:
    if name == "random":
        return RandomRobot(graph, rng)
    if name == "route":
        return RouteRobot(mail_route)
    if name == "goal":
        return GoalOrientedRobot(graph)
    if name == "lazy":
        return LazyRobot(graph)
    raise ValueError(f"Robot no soportado: {name}")
