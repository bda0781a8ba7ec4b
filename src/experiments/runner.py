from pathlib import Path
from typing import List, Optional, Iterator, Tuple
import csv
import math

import numpy as np

from src.sampling.factory import GeneratorFactory
from src.sampling.generators import Generator
from src.experiments.cases import MeanCheckConfig
from src.experiments.kpis import MeanCheckRow, to_row

FIELDNAMES = [
    "family", "parameter", "accepted", "count", "seed",
    "expected_mean", "computed_mean", "abs_error",
]

def geometric_mean_failures(p: float) -> float:
    """E[fracasos antes del primer éxito] = (1-p)/p."""
    return math.inf if p == 0 else (1.0 - p) / p

def _case_seed(base: Optional[int], idx: int) -> Optional[int]:
    # una semilla distinta por caso: generadores independientes y reproducibles
    return None if base is None else base + idx

def _iter_cases(cfg: MeanCheckConfig, factory: GeneratorFactory) -> Iterator[Tuple[str, str, Optional[float], Optional[Generator]]]:
    idx = 0
    for lam in cfg.poisson_lambdas:
        yield "poisson", f"{lam}", lam, factory.create("poisson", lam, seed=_case_seed(cfg.seed, idx))
        idx += 1
    for p in cfg.bernoulli_ps:
        yield "bernoulli", f"{p}", p, factory.create("bernoulli", p, seed=_case_seed(cfg.seed, idx))
        idx += 1
    for p in cfg.geometric_ps:
        yield "geometric", f"{p}", geometric_mean_failures(p), factory.create("geometric", p, seed=_case_seed(cfg.seed, idx))
        idx += 1
    for fs in cfg.finite_sets:
        gen = factory.create_finite("finite", fs.values, fs.probabilities, seed=_case_seed(cfg.seed, idx))
        yield "finite", f"{fs.values}|{fs.probabilities}", fs.expected_mean(), gen
        idx += 1

def sample_mean(gen: Generator, count: int) -> float:
    assert count >= 1
    return float(np.mean(gen.sample(count)))

def run_mean_checks(cfg: MeanCheckConfig, factory: Optional[GeneratorFactory] = None) -> List[MeanCheckRow]:
    """Un renglón por caso; los casos que la fábrica rechaza quedan con accepted=False."""
    cfg.validate()
    factory = factory or GeneratorFactory()
    rows: List[MeanCheckRow] = []
    for family, param, expected, gen in _iter_cases(cfg, factory):
        if gen is None:
            rows.append(to_row(family, param, cfg.count, cfg.seed))
            continue
        rows.append(to_row(family, param, cfg.count, cfg.seed,
                           expected=expected, computed=sample_mean(gen, cfg.count)))
    return rows

def write_csv(rows: List[MeanCheckRow], out_csv: Path) -> Path:
    out_csv.parent.mkdir(parents=True, exist_ok=True)
    with out_csv.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=FIELDNAMES)
        w.writeheader()
        for row in rows:
            w.writerow(row.to_dict())
    return out_csv
