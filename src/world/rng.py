from dataclasses import dataclass
from typing import Optional, Sequence, TypeVar
import numpy as np

T = TypeVar("T")

@dataclass
class RNG:
    """RNG centralizado para reproducibilidad entre módulos."""
    seed: Optional[int] = None

    def __post_init__(self):
        self._rs = np.random.default_rng(self.seed)

    def integers(self, *args, **kwargs):
        return self._rs.integers(*args, **kwargs)

    def pick(self, items: Sequence[T]) -> T:
        """Elemento uniforme de una secuencia, conservando su tipo (no np.str_)."""
        if not items:
            raise ValueError("pick() sobre secuencia vacía")
        return items[int(self._rs.integers(len(items)))]
