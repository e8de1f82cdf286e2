"""LawRunner: checks every law over its sample domain, one stage per law.

Each stage records a log entry (stage name, domain, sample count,
violations). In strict mode the first failing stage raises LawViolation;
otherwise failures are collected into the result.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from binary_counter.analysis.samples import enumerate_trees, natural_range, random_trees
from binary_counter.core.config import CheckConfig
from binary_counter.core.invariants import LawViolation
from binary_counter.core.tree import BinTree
from binary_counter.laws.base import Law
from binary_counter.laws.registry import default_laws


@dataclass(frozen=True)
class StageRecord:
    """Outcome of checking one law."""

    name: str
    domain: str
    samples: int
    violations: tuple[str, ...]

    @property
    def passed(self) -> bool:
        return not self.violations


@dataclass(frozen=True)
class LawCheckResult:
    """Outcome of a full LawRunner run."""

    config: CheckConfig
    stages: tuple[StageRecord, ...]

    @property
    def passed(self) -> bool:
        return all(s.passed for s in self.stages)

    @property
    def total_samples(self) -> int:
        return sum(s.samples for s in self.stages)

    @property
    def total_violations(self) -> int:
        return sum(len(s.violations) for s in self.stages)

    def failed_stages(self) -> list[StageRecord]:
        return [s for s in self.stages if not s.passed]


class LawRunner:
    """Runs a list of laws over samples drawn according to a CheckConfig."""

    def __init__(
        self,
        config: CheckConfig | None = None,
        laws: list[Law] | None = None,
    ) -> None:
        self.config = config or CheckConfig()
        self.laws = laws if laws is not None else default_laws()
        self._stage_log: list[dict[str, Any]] = []
        self._tree_samples: list[BinTree] | None = None

    def tree_samples(self) -> list[BinTree]:
        """Exhaustive trees up to max_depth followed by the seeded random trees."""
        if self._tree_samples is None:
            cfg = self.config
            samples = list(enumerate_trees(cfg.max_depth))
            samples.extend(random_trees(cfg.random_samples, cfg.random_max_depth, cfg.seed))
            self._tree_samples = samples
        return self._tree_samples

    def samples_for(self, law: Law) -> list[Any]:
        if law.domain == "natural":
            return list(natural_range(self.config.max_n))
        if law.domain == "tree":
            return self.tree_samples()
        raise ValueError(f"Law {law.name!r} has unknown domain {law.domain!r}")

    def run_law(self, law: Law) -> StageRecord:
        """Check one law over its domain; raises LawViolation in strict mode."""
        samples = self.samples_for(law)
        violations: list[str] = []
        for sample in samples:
            violations.extend(law.check(sample))

        record = StageRecord(
            name=law.name,
            domain=law.domain,
            samples=len(samples),
            violations=tuple(violations),
        )
        self._stage_log.append({
            "stage": law.name,
            "domain": law.domain,
            "samples": len(samples),
            "violations": violations,
        })

        if violations and self.config.strict:
            raise LawViolation(law.name, violations)
        return record

    def run(self) -> LawCheckResult:
        """Check every law in order."""
        stages = tuple(self.run_law(law) for law in self.laws)
        return LawCheckResult(config=self.config, stages=stages)

    @property
    def stage_log(self) -> list[dict[str, Any]]:
        """Log of all stages run and their validation results."""
        return list(self._stage_log)


def check_laws(config: CheckConfig | None = None) -> LawCheckResult:
    """Run the default law set."""
    return LawRunner(config).run()
