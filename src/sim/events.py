from dataclasses import dataclass, asdict
from typing import Any, Dict
from src.village.graph import Place

@dataclass(frozen=True)
class MoveEvent:
    """Un turno del robot tal como quedó en la traza."""
    turn: int            # 1, 2, ... (turnos ya consumidos)
    direction: Place     # lo que pidió el robot
    place: Place         # dónde quedó (igual a direction salvo movimiento inválido)
    parcels_left: int    # paquetes pendientes tras el movimiento
    moved: bool = True   # False si el movimiento era inválido y se perdió el turno

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
