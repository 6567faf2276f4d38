from pathlib import Path
from src.experiments.runner import run_benchmark
from src.experiments.summary import summarize_csv, write_summary
from src.spec.project_spec import VillageSpec

def main():
    spec = VillageSpec.default()
    spec.validate()
    bench = spec.benchmark

    out_csv = Path("outputs/experiments/robots.csv")
    csv_path = run_benchmark(
        out_csv=out_csv,
        graph=spec.build_graph(),
        robots=bench.robots,
        parcel_counts=[1, 3, 5, 8],   # más niveles que el default para ver la tendencia
        seeds=bench.seeds,
        trials=bench.trials,
        mail_route=spec.mail_route,
        start=spec.start,
    )
    print(f"CSV: {csv_path}")

    summary_path = write_summary(csv_path, Path("outputs/experiments/robots_summary.csv"))
    print(summarize_csv(csv_path).to_string(index=False))
    print(f"Resumen en {summary_path}")

if __name__ == "__main__":
    main()
