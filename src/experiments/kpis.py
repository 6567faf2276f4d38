from dataclasses import dataclass, asdict
from typing import Dict, Any, List
from statistics import mean

@dataclass
class RowKPIs:
    robot: str
    seed: int
    parcel_count: int
    trial: int

    parcels: int
    steps: int
    steps_per_parcel: float

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

FIELDNAMES: List[str] = ["robot", "seed", "parcel_count", "trial", "parcels", "steps", "steps_per_parcel"]

def to_row(robot: str, seed: int, parcel_count: int, trial: int, parcels: int, steps: int) -> RowKPIs:
    return RowKPIs(
        robot=robot,
        seed=seed,
        parcel_count=parcel_count,
        trial=trial,
        parcels=parcels,
        steps=steps,
        steps_per_parcel=(steps / parcels) if parcels > 0 else 0.0,
    )

def mean_steps(steps: List[int]) -> float:
    return float(mean(steps)) if steps else 0.0
