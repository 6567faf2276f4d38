from pathlib import Path
import pandas as pd

def summarize_csv(csv_path: Path) -> pd.DataFrame:
    """Pasos promedio (y dispersión) por robot y cantidad de paquetes."""
    df = pd.read_csv(csv_path)
    agg = (df
        .groupby(["robot", "parcel_count"])["steps"]
        .agg(["mean", "std", "min", "max", "count"])
        .reset_index())
    return agg.sort_values(["parcel_count", "mean"]).reset_index(drop=True)

def write_summary(csv_path: Path, out_csv: Path) -> Path:
    agg = summarize_csv(csv_path)
    out_csv.parent.mkdir(parents=True, exist_ok=True)
    agg.to_csv(out_csv, index=False)
    return out_csv
