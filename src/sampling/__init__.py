# src/sampling/__init__.py
from .rng import RNG
from .generators import (
    Generator,
    PoissonGenerator,
    BernoulliGenerator,
    GeometricGenerator,
    FiniteGenerator,
)
from .factory import GeneratorFactory, SINGLE_PARAM_NAMES, FINITE_NAME

__all__ = [
    "RNG",
    "Generator",
    "PoissonGenerator",
    "BernoulliGenerator",
    "GeometricGenerator",
    "FiniteGenerator",
    "GeneratorFactory",
    "SINGLE_PARAM_NAMES",
    "FINITE_NAME",
]
