# src/sampling/factory.py
from typing import Optional, Sequence

from .generators import (
    Generator,
    PoissonGenerator,
    BernoulliGenerator,
    GeometricGenerator,
    FiniteGenerator,
)

SINGLE_PARAM_NAMES = ("poisson", "bernoulli", "geometric")
FINITE_NAME = "finite"
SUM_TOLERANCE = 1e-9

def _is_probability(x: float) -> bool:
    # NaN falla ambas comparaciones
    return 0.0 <= x <= 1.0

class GeneratorFactory:
    """
    Valida (nombre, parámetros) y construye el generador correspondiente.
    Una petición inválida devuelve None; nunca lanza excepción por validación.
    """

    def create(self, name: str, parameter: float, seed: Optional[int] = None) -> Optional[Generator]:
        if name not in SINGLE_PARAM_NAMES:
            return None
        if name == "poisson":
            return PoissonGenerator(parameter, seed=seed)
        if name == "bernoulli" and _is_probability(parameter):
            return BernoulliGenerator(parameter, seed=seed)
        if name == "geometric" and _is_probability(parameter):
            return GeometricGenerator(parameter, seed=seed)
        return None

    def create_finite(
        self,
        name: str,
        values: Sequence[float],
        probabilities: Sequence[float],
        seed: Optional[int] = None,
    ) -> Optional[Generator]:
        if name != FINITE_NAME:
            return None
        if len(values) == 0 or len(probabilities) != len(values):
            return None
        if not all(_is_probability(p) for p in probabilities):
            return None
        if not abs(sum(probabilities) - 1.0) < SUM_TOLERANCE:
            return None
        return FiniteGenerator(values, probabilities, seed=seed)
