import math
import pytest
from src.sampling.factory import GeneratorFactory, SINGLE_PARAM_NAMES, FINITE_NAME
from src.sampling.generators import (
    PoissonGenerator, BernoulliGenerator, GeometricGenerator, FiniteGenerator
)

@pytest.fixture
def factory():
    return GeneratorFactory()

def test_poisson_accepts_any_parameter(factory):
    for lam in [0.5, 8, 1e6, -1.0]:
        assert isinstance(factory.create("poisson", lam), PoissonGenerator)

def test_bernoulli_range(factory):
    assert factory.create("bernoulli", -0.1) is None
    assert factory.create("bernoulli", 1.1) is None
    assert isinstance(factory.create("bernoulli", 0.0), BernoulliGenerator)
    assert isinstance(factory.create("bernoulli", 1.0), BernoulliGenerator)

def test_geometric_builds_true_geometric(factory):
    gen = factory.create("geometric", 0.35)
    assert isinstance(gen, GeometricGenerator)
    assert isinstance(factory.create("geometric", 0.0), GeometricGenerator)
    assert isinstance(factory.create("geometric", 1.0), GeometricGenerator)
    assert factory.create("geometric", -0.01) is None
    assert factory.create("geometric", 1.5) is None

def test_nan_parameter_is_rejected(factory):
    assert factory.create("bernoulli", math.nan) is None
    assert factory.create("geometric", math.nan) is None

def test_unknown_names_are_rejected(factory):
    assert factory.create("normal", 0.5) is None
    assert factory.create("Poisson", 1.0) is None
    assert factory.create("finite", 0.5) is None
    assert factory.create_finite("bernoulli", [1, 2], [0.5, 0.5]) is None

def test_finite_valid_and_invalid_tables(factory):
    assert isinstance(factory.create_finite("finite", [1, 2, 3], [0.3, 0.3, 0.4]), FiniteGenerator)
    assert factory.create_finite("finite", [1, 2], [0.3, 0.3, 0.4]) is None   # largos distintos
    assert factory.create_finite("finite", [], []) is None                    # vacío
    sym = [1, -1, 2, -2, 3, -3, 4, -4, 5, -5]
    assert isinstance(factory.create_finite("finite", sym, [0.1] * 10), FiniteGenerator)

def test_finite_probability_out_of_range(factory):
    assert factory.create_finite("finite", [1, 2], [1.5, -0.5]) is None
    assert factory.create_finite("finite", [1, 2], [0.3, 0.3]) is None

def test_finite_sum_tolerance_boundary(factory):
    assert factory.create_finite("finite", [1, 2], [0.5, 0.5 + 2e-9]) is None
    assert factory.create_finite("finite", [1, 2], [0.5, 0.5 + 5e-10]) is not None

def test_validation_is_deterministic(factory):
    requests = [("bernoulli", 0.3), ("bernoulli", 2.0), ("geometric", 0.5), ("poisson", 3.0), ("x", 1.0)]
    first = [factory.create(n, p) is None for n, p in requests]
    for _ in range(5):
        assert [GeneratorFactory().create(n, p) is None for n, p in requests] == first

def test_finite_validation_is_deterministic(factory):
    tables = [
        ("finite", [1, 2, 3], [0.3, 0.3, 0.4]),
        ("finite", [1, 2], [0.3, 0.3, 0.4]),
        ("finite", [], []),
        ("finite", [1, 2], [0.5, 0.5 + 2e-9]),
        ("categorical", [1], [1.0]),
    ]
    first = [factory.create_finite(n, v, p) is None for n, v, p in tables]
    assert first == [False, True, True, True, True]
    for _ in range(5):
        assert [GeneratorFactory().create_finite(n, v, p) is None for n, v, p in tables] == first

def test_seed_is_threaded_through(factory):
    a = factory.create_finite("finite", [1, 2, 3], [0.3, 0.3, 0.4], seed=42)
    b = factory.create_finite("finite", [1, 2, 3], [0.3, 0.3, 0.4], seed=42)
    assert a.sample(100) == b.sample(100)
    assert factory.create("poisson", 2.0, seed=7).sample(20) == factory.create("poisson", 2.0, seed=7).sample(20)

def test_single_param_names_are_the_accepted_ones(factory):
    for name in SINGLE_PARAM_NAMES:
        assert factory.create(name, 0.5) is not None
    assert factory.create(FINITE_NAME, 0.5) is None
