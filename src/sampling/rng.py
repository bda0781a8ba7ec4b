from dataclasses import dataclass
from typing import Optional
import numpy as np

@dataclass
class RNG:
    """Estado pseudoaleatorio privado de cada generador (un RNG por instancia, nunca compartido)."""
    seed: Optional[int] = None

    def __post_init__(self):
        self._rs = np.random.default_rng(self.seed)

    def random(self, size=None):
        return self._rs.random(size=size)

    def poisson(self, lam, size=None):
        return self._rs.poisson(lam=lam, size=size)

    def geometric(self, p, size=None):
        # numpy cuenta ensayos hasta el primer éxito (>= 1)
        return self._rs.geometric(p=p, size=size)
