"""Law protocol: name, domain, check(), explain()."""

from __future__ import annotations

from typing import Any, Literal, Protocol, runtime_checkable

Domain = Literal["tree", "natural"]


@runtime_checkable
class Law(Protocol):
    """Protocol for executable correctness laws."""

    name: str
    domain: Domain

    def check(self, sample: Any) -> list[str]:
        """Violation messages for one sample (a tree or an int); empty if the law holds."""
        ...

    def explain(self) -> str:
        """Human-readable statement of the law and why it holds."""
        ...
