"""Clone outcome data models."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from ghclone.types.repos import RepositoryRef


class CloneStatus(str, Enum):
    """Terminal state of one repository clone."""

    SUCCESS = "success"
    FAILURE = "failure"


@dataclass
class CloneOutcome:
    """Result of cloning a single repository."""

    ref: RepositoryRef
    status: CloneStatus
    path: Path
    reason: str | None = None  # set only on failure

    @property
    def succeeded(self) -> bool:
        return self.status is CloneStatus.SUCCESS


@dataclass
class CloneReport:
    """Aggregated outcomes of a clone run, in input order."""

    destination: Path
    outcomes: list[CloneOutcome] = field(default_factory=list)

    @property
    def succeeded(self) -> list[CloneOutcome]:
        return [o for o in self.outcomes if o.succeeded]

    @property
    def failed(self) -> list[CloneOutcome]:
        return [o for o in self.outcomes if not o.succeeded]

    @property
    def ok(self) -> bool:
        """True when every repository was cloned."""
        return not self.failed
