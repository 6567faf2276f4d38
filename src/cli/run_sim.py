import argparse
from pathlib import Path
from src.world.rng import RNG
from src.world.state import VillageState
from src.sim.policies import make_robot
from src.sim.engine import Simulator, SimConfig
from src.spec.project_spec import VillageSpec, ROBOT_NAMES
from src.spec.config_loader import load_config

def main():
    parser = argparse.ArgumentParser(description="Correr un robot sobre una tarea aleatoria (modo traza).")
    parser.add_argument("--robot", choices=ROBOT_NAMES, default="lazy")
    parser.add_argument("--seed", type=int, default=123)
    parser.add_argument("--max-turns", type=int, default=None, help="Tope de turnos (por defecto sin tope)")
    parser.add_argument("--config", type=Path, help="Ruta a JSON/YAML (opcional)")
    args = parser.parse_args()

    spec = VillageSpec.default() if not args.config else VillageSpec.from_dict(load_config(args.config))
    spec.validate()
    graph = spec.build_graph()

    rng = RNG(seed=args.seed)
    state = VillageState.random(graph, rng, spec.parcel_spec(), spec.start)
    robot = make_robot(args.robot, graph, rng=rng, mail_route=spec.mail_route)

    print(f"Robot: {args.robot}  Inicio: {state.place}  Paquetes: {len(state.parcels)}")
    for p in state.parcels:
        print(f"  {p.place} → {p.address}")

    cfg = SimConfig(robot=args.robot, max_turns=args.max_turns, trace=True)
    res = Simulator(state, robot, cfg).run()
    print(f"Turns: {res.turns}  Delivered: {res.delivered}/{res.parcels_total}  Wasted: {res.wasted_turns}")

if __name__ == "__main__":
    main()
