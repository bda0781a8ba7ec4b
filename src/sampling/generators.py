# src/sampling/generators.py
from dataclasses import InitVar, dataclass, field
from typing import List, Optional, Sequence, Tuple
import math
import numpy as np

from .rng import RNG


class Generator:
    """
    Fuente de muestras reales de una distribución fija.

    Los parámetros son inmutables tras construir (dataclasses congeladas). `generate()`
    muestrea siempre la misma distribución, pero cada llamada avanza el RNG privado de
    la instancia: dos llamadas seguidas pueden devolver valores distintos.
    Las instancias no son seguras entre hilos; usar una por hilo.
    """
    rng: RNG

    def generate(self) -> float:
        raise NotImplementedError

    def sample(self, n: int) -> List[float]:
        """n muestras independientes (misma distribución que n llamadas a generate())."""
        if n < 0:
            raise ValueError(f"n debe ser >= 0 (recibido {n})")
        if n == 0:
            return []
        return [float(x) for x in self._draw(n)]

    def _draw(self, n: int) -> np.ndarray:
        return np.array([self.generate() for _ in range(n)], dtype=float)

    def _init_rng(self, seed: Optional[int]):
        # la dataclass está congelada: el estado derivado se fija una sola vez aquí
        object.__setattr__(self, "rng", RNG(seed=seed))


@dataclass(frozen=True)
class PoissonGenerator(Generator):
    """Poisson(λ). λ no se valida aquí; numpy rechaza λ < 0 al muestrear."""
    lam: float
    seed: Optional[int] = None
    rng: RNG = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        self._init_rng(self.seed)

    def generate(self) -> float:
        return float(self.rng.poisson(self.lam))

    def _draw(self, n: int) -> np.ndarray:
        return self.rng.poisson(self.lam, size=n)


@dataclass(frozen=True)
class BernoulliGenerator(Generator):
    """0.0 o 1.0 con P(1) = p."""
    p: float
    seed: Optional[int] = None
    rng: RNG = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        self._init_rng(self.seed)

    def generate(self) -> float:
        # random() ∈ [0,1): p=0 nunca da 1, p=1 siempre
        return 1.0 if self.rng.random() < self.p else 0.0

    def _draw(self, n: int) -> np.ndarray:
        return (self.rng.random(n) < self.p).astype(float)


@dataclass(frozen=True)
class GeometricGenerator(Generator):
    """Fracasos antes del primer éxito, con probabilidad de éxito p por ensayo."""
    p: float
    seed: Optional[int] = None
    rng: RNG = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        self._init_rng(self.seed)

    def generate(self) -> float:
        if self.p == 0:
            return math.inf
        return float(self.rng.geometric(self.p) - 1)

    def _draw(self, n: int) -> np.ndarray:
        if self.p == 0:
            return np.full(n, math.inf)
        return self.rng.geometric(self.p, size=n) - 1


@dataclass(frozen=True)
class FiniteGenerator(Generator):
    """
    Distribución categórica sobre `values`.

    Al construir se guarda la tabla acumulada de `probabilities` (sumas prefijas, solo lectura);
    el muestreo consulta únicamente esa tabla. Con u ~ U[0,1) se devuelve values[i] tal que
    cum[i] < u <= cum[i+1], recorriendo los índices en orden. Si ningún intervalo contiene u
    (u <= cum[0], o u > cum[-1] por redondeo) se devuelve el último valor.
    """
    values: Sequence[float]
    probabilities: InitVar[Sequence[float]]
    seed: Optional[int] = None
    rng: RNG = field(init=False, repr=False, compare=False)

    def __post_init__(self, probabilities):
        values = tuple(float(v) for v in self.values)
        cum = np.cumsum(np.asarray(probabilities, dtype=float))
        cum.setflags(write=False)
        vals = np.asarray(values, dtype=float)
        vals.setflags(write=False)
        object.__setattr__(self, "values", values)
        object.__setattr__(self, "_cum", cum)
        object.__setattr__(self, "_vals", vals)
        self._init_rng(self.seed)

    @property
    def cumulative(self) -> Tuple[float, ...]:
        return tuple(self._cum.tolist())

    def _lookup(self, u):
        # primer k con cum[k] >= u  =>  cum[k-1] < u <= cum[k]  =>  i = k-1
        i = np.searchsorted(self._cum, u, side="left") - 1
        last = len(self._vals) - 1
        i = np.where((i >= 0) & (i < last), i, last)
        return self._vals[i]

    def generate(self) -> float:
        return float(self._lookup(self.rng.random()))

    def _draw(self, n: int) -> np.ndarray:
        return self._lookup(self.rng.random(n))
