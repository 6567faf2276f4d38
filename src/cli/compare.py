import argparse
from pathlib import Path
from src.world.rng import RNG
from src.sim.policies import make_robot
from src.experiments.runner import compare_robots
from src.spec.project_spec import VillageSpec, ROBOT_NAMES
from src.spec.config_loader import load_config

def main():
    parser = argparse.ArgumentParser(description="Comparar dos robots sobre las mismas tareas aleatorias.")
    parser.add_argument("robot_a", choices=ROBOT_NAMES)
    parser.add_argument("robot_b", choices=ROBOT_NAMES)
    parser.add_argument("--trials", type=int, default=100)
    parser.add_argument("--seed", type=int, default=42)
    parser.add_argument("--config", type=Path, help="Ruta a JSON/YAML (opcional)")
    args = parser.parse_args()

    spec = VillageSpec.default() if not args.config else VillageSpec.from_dict(load_config(args.config))
    spec.validate()
    graph = spec.build_graph()

    robot_a = make_robot(args.robot_a, graph, rng=RNG(seed=args.seed + 1), mail_route=spec.mail_route)
    robot_b = make_robot(args.robot_b, graph, rng=RNG(seed=args.seed + 2), mail_route=spec.mail_route)
    res = compare_robots(
        graph,
        robot_a, robot_a.initial_memory(),
        robot_b, robot_b.initial_memory(),
        trials=args.trials,
        rng=RNG(seed=args.seed),
        parcel_spec=spec.parcel_spec(),
        start=spec.start,
    )
    print(f"Robot 1 ({args.robot_a}) needed {res.mean_a:.2f} steps per task")
    print(f"Robot 2 ({args.robot_b}) needed {res.mean_b:.2f} steps per task")

if __name__ == "__main__":
    main()
