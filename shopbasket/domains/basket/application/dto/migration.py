"""Migration report DTOs.

Outcome of moving a basket from one locale to another, one entry per
address, service, product and coupon.
"""

from dataclasses import dataclass, field
from typing import Any

from shopbasket.core.domain import StatusEnum


class MigrationStatus(StatusEnum):
    MIGRATED = "migrated"
    FAILED = "failed"
    SKIPPED = "skipped"


@dataclass(frozen=True)
class MigrationOutcome:
    """Result for a single basket part."""

    kind: str  # address, service, product or coupon
    key: Any  # address/service type, product position or coupon code
    status: MigrationStatus
    message: str = ""


@dataclass
class MigrationReport:
    """Collected outcomes of one locale migration."""

    source: str = ""
    target: str = ""
    outcomes: list[MigrationOutcome] = field(default_factory=list)

    def migrated(self, kind: str, key: Any) -> None:
        self.outcomes.append(MigrationOutcome(kind, key, MigrationStatus.MIGRATED))

    def failed(self, kind: str, key: Any, message: str) -> None:
        self.outcomes.append(MigrationOutcome(kind, key, MigrationStatus.FAILED, message))

    def skipped(self, kind: str, key: Any, message: str = "") -> None:
        self.outcomes.append(MigrationOutcome(kind, key, MigrationStatus.SKIPPED, message))

    def by_status(self, status: MigrationStatus) -> list[MigrationOutcome]:
        return [o for o in self.outcomes if o.status == status]

    @property
    def errors(self) -> dict[str, dict[Any, str]]:
        """Failure messages grouped by kind, e.g. {"product": {0: "..."}}."""
        result: dict[str, dict[Any, str]] = {}
        for outcome in self.by_status(MigrationStatus.FAILED):
            result.setdefault(outcome.kind, {})[outcome.key] = outcome.message
        return result

    def has_errors(self) -> bool:
        return any(o.status == MigrationStatus.FAILED for o in self.outcomes)
