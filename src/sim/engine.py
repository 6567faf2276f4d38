# src/sim/engine.py
from dataclasses import dataclass, field
from typing import Any, Iterator, List, Optional

from src.sim.events import MoveEvent
from src.sim.policies import Robot
from src.world.state import VillageState


# --------------------------- Configuración y resultados ---------------------------

@dataclass
class SimConfig:
    robot: str = "lazy"                 # "random" | "route" | "goal" | "lazy"
    max_turns: Optional[int] = None     # si None, corre hasta entregar todo
    trace: bool = False                 # imprime cada movimiento y el cierre


@dataclass
class SimResult:
    turns: int
    completed: bool                     # True si no quedó ningún paquete
    parcels_total: int
    parcels_left: int
    wasted_turns: int                   # movimientos inválidos absorbidos
    moves: List[MoveEvent] = field(default_factory=list)

    @property
    def delivered(self) -> int:
        return self.parcels_total - self.parcels_left


# ------------------------------- Bucle central ---------------------------------

def iter_moves(
    state: VillageState,
    robot: Robot,
    memory: Any,
    max_turns: Optional[int] = None,
) -> Iterator[MoveEvent]:
    """
    Único bucle de simulación: pide una decisión, aplica move() y actualiza la
    memoria hasta que no quedan paquetes (o se alcanza max_turns).
    """
    turn = 0
    while state.parcels:
        if max_turns is not None and turn >= max_turns:
            return
        action = robot.decide(state, memory)
        nxt = state.move(action.direction)
        memory = action.memory
        turn += 1
        yield MoveEvent(
            turn=turn,
            direction=action.direction,
            place=nxt.place,
            parcels_left=len(nxt.parcels),
            moved=nxt is not state,
        )
        state = nxt


def run_robot(state: VillageState, robot: Robot, memory: Any) -> int:
    """Modo traza: imprime cada movimiento y el total de turnos."""
    turns = 0
    for ev in iter_moves(state, robot, memory):
        turns = ev.turn
        print(f"Moved to {ev.direction}")
    print(f"Done in {turns} turns")
    return turns


def count_steps(state: VillageState, robot: Robot, memory: Any) -> int:
    """Modo conteo: sólo el número de turnos hasta entregar todo."""
    steps = 0
    for _ in iter_moves(state, robot, memory):
        steps += 1
    return steps


# ------------------------------- Simulador ---------------------------------

class Simulator:
    """
    Corre un robot sobre un estado inicial y guarda la traza de movimientos.
    """

    def __init__(self, state: VillageState, robot: Robot, cfg: Optional[SimConfig] = None, memory: Any = None):
        self.state = state
        self.robot = robot
        self.cfg = cfg or SimConfig(robot=robot.name)
        self.memory = robot.initial_memory() if memory is None else memory

    def run(self) -> SimResult:
        moves: List[MoveEvent] = []
        for ev in iter_moves(self.state, self.robot, self.memory, max_turns=self.cfg.max_turns):
            moves.append(ev)
            if self.cfg.trace:
                print(f"Moved to {ev.direction}")

        turns = len(moves)
        parcels_left = moves[-1].parcels_left if moves else len(self.state.parcels)
        completed = parcels_left == 0
        if self.cfg.trace:
            if completed:
                print(f"Done in {turns} turns")
            else:
                print(f"Stopped after {turns} turns ({parcels_left} parcels left)")

        return SimResult(
            turns=turns,
            completed=completed,
            parcels_total=len(self.state.parcels),
            parcels_left=parcels_left,
            wasted_turns=sum(1 for m in moves if not m.moved),
            moves=moves,
        )
