from dataclasses import dataclass, field
from typing import List, Dict, Optional, Any

@dataclass
class FiniteCase:
    values: List[float]
    probabilities: List[float]

    def expected_mean(self) -> float:
        return sum(v * p for v, p in zip(self.values, self.probabilities))

@dataclass
class MeanCheckConfig:
    poisson_lambdas: List[float]
    bernoulli_ps: List[float]
    geometric_ps: List[float]
    finite_sets: List[FiniteCase] = field(default_factory=list)
    count: int = 100000
    seed: Optional[int] = None   # None => semilla por entropía del sistema

    @staticmethod
    def from_dict(d: Dict[str, Any]) -> "MeanCheckConfig":
        known = {"poisson", "bernoulli", "geometric", "finite", "count", "seed"}
        unknown = set(d) - known
        if unknown:
            raise ValueError(f"Familias/opciones desconocidas: {sorted(unknown)}")
        return MeanCheckConfig(
            poisson_lambdas=list(d.get("poisson", [])),
            bernoulli_ps=list(d.get("bernoulli", [])),
            geometric_ps=list(d.get("geometric", [])),
            finite_sets=[FiniteCase(**fs) for fs in d.get("finite", [])],
            count=d.get("count", 100000),
            seed=d.get("seed"),
        )

    @staticmethod
    def default() -> "MeanCheckConfig":
        """Casos de demostración (incluye dos tablas finitas inválidas que se omiten)."""
        return MeanCheckConfig.from_dict({
            "poisson": [1, 3.58, 5, 8],
            "bernoulli": [0, 1, 0.58, 0.83],
            "geometric": [1, 0.58, 0.83, 0.35],
            "finite": [
                {"values": [1, 2, 3], "probabilities": [0.3, 0.3, 0.4]},
                {"values": [1, 2], "probabilities": [0.3, 0.3, 0.4]},
                {"values": [], "probabilities": []},
                {"values": [1, -1, 2, -2, 3, -3, 4, -4, 5, -5], "probabilities": [0.1] * 10},
            ],
        })

    def validate(self) -> None:
        assert self.count >= 1, "count debe ser >= 1"
        assert (self.poisson_lambdas or self.bernoulli_ps or self.geometric_ps or self.finite_sets), \
            "Definir al menos un caso"

    def n_cases(self) -> int:
        return (len(self.poisson_lambdas) + len(self.bernoulli_ps)
                + len(self.geometric_ps) + len(self.finite_sets))

    def summary(self) -> str:
        s = []
        s.append("=== VERIFICACIÓN DE MEDIAS ===")
        s.append(f"Muestras por caso: {self.count}")
        s.append(f"Semilla: {self.seed if self.seed is not None else 'aleatoria'}")
        s.append(f"- poisson λ = {self.poisson_lambdas}")
        s.append(f"- bernoulli p = {self.bernoulli_ps}")
        s.append(f"- geometric p = {self.geometric_ps}")
        s.append(f"- finite = {len(self.finite_sets)} tablas")
        return "\n".join(s)
