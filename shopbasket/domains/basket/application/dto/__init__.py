from .address import AddressInput
from .migration import MigrationOutcome, MigrationReport, MigrationStatus

__all__ = [
    "AddressInput",
    "MigrationOutcome",
    "MigrationReport",
    "MigrationStatus",
]
