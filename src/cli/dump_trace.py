# src/cli/dump_trace.py
import json
from pathlib import Path

from src.village.graph import RoadGraph
from src.world.rng import RNG
from src.world.state import VillageState
from src.sim.policies import make_robot
from src.sim.engine import SimConfig
from src.api.simtrace import simulate_with_trace

OUT_DIR = Path("outputs/trace")

def main():
    OUT_DIR.mkdir(parents=True, exist_ok=True)

    # --- pueblo y tarea demo ---
    graph = RoadGraph.default()
    rng = RNG(seed=42)
    state = VillageState.random(graph, rng)

    # --- traza por robot ---
    for name in ("route", "goal", "lazy"):
        robot = make_robot(name, graph, rng=rng)
        cfg = SimConfig(robot=name)
        trace, kpis = simulate_with_trace(state, robot, cfg)

        json_path = OUT_DIR / f"trace_{name}.json"
        with open(json_path, "w", encoding="utf-8") as f:
            json.dump({"trace": trace, "kpis": kpis}, f, ensure_ascii=False, indent=2)
        print(f"[OK] {name}: {kpis['turns']} turnos → {json_path}")

if __name__ == "__main__":
    main()
