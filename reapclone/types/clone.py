"""Clone run data models."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class CloneOutcome:
    """Result of cloning a single repository."""

    clone_url: str
    succeeded: bool


@dataclass
class CloneReport:
    """Aggregated outcomes of a clone run, one per repository."""

    outcomes: list[CloneOutcome] = field(default_factory=list)

    @property
    def succeeded(self) -> list[CloneOutcome]:
        return [o for o in self.outcomes if o.succeeded]

    @property
    def failed(self) -> list[CloneOutcome]:
        return [o for o in self.outcomes if not o.succeeded]

    @property
    def total(self) -> int:
        return len(self.outcomes)
