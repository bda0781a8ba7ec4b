from dataclasses import dataclass, asdict
from typing import Dict, Any, Optional
import math

@dataclass
class MeanCheckRow:
    family: str
    parameter: str
    accepted: bool
    count: int
    seed: Optional[int]

    expected_mean: Optional[float] = None
    computed_mean: Optional[float] = None
    abs_error: Optional[float] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

def abs_error(expected: float, computed: float) -> float:
    # inf vs inf (geométrica con p=0) cuenta como error nulo
    if math.isinf(expected) and computed == expected:
        return 0.0
    return abs(computed - expected)

def to_row(family: str, parameter: str, count: int, seed: Optional[int],
           expected: Optional[float] = None, computed: Optional[float] = None) -> MeanCheckRow:
    accepted = computed is not None
    return MeanCheckRow(
        family=family,
        parameter=parameter,
        accepted=accepted,
        count=count,
        seed=seed,
        expected_mean=expected if accepted else None,
        computed_mean=computed,
        abs_error=abs_error(expected, computed) if accepted else None,
    )
