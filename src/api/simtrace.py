# src/api/simtrace.py
from typing import Dict, Any, Tuple
from src.sim.engine import Simulator, SimConfig
from src.sim.policies import Robot
from src.world.state import VillageState

def simulate_with_trace(state: VillageState, robot: Robot, cfg: SimConfig) -> Tuple[Dict[str, Any], Dict[str, Any]]:
    """
    Corre la simulación y devuelve (todo serializable a JSON):
      - trace: { meta, moves }
      - kpis:  { turns, completed, parcels_total, delivered, wasted_turns }
    """
    res = Simulator(state, robot, cfg).run()
    trace = {
        "meta": {
            "robot": cfg.robot,
            "start": state.place,
            "parcels": [{"place": p.place, "address": p.address} for p in state.parcels],
            "max_turns": cfg.max_turns,
        },
        "moves": [m.to_dict() for m in res.moves],
    }
    kpis = {
        "turns": res.turns,
        "completed": res.completed,
        "parcels_total": res.parcels_total,
        "delivered": res.delivered,
        "wasted_turns": res.wasted_turns,
    }
    return trace, kpis
