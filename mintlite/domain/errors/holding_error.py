"""Holding domain errors.

Defines holding error constants used as ``Failure`` payloads by handlers, and
the optimistic concurrency exception raised by repositories.

Usage:
    from mintlite.domain.errors import HoldingError
    from mintlite.core.result import Failure

    if holding is None:
        return Failure(error=HoldingError.NOT_FOUND)
"""

from uuid import UUID


class HoldingError:
    """Holding error constants.

    These are NOT exceptions - they are error value constants used in the
    railway-oriented programming pattern.

    Error Categories:
        - Lookup errors: NOT_FOUND
        - Concurrency errors: VERSION_CONFLICT
    """

    NOT_FOUND = "Holding not found"
    """Holding does not exist or belongs to another user."""

    VERSION_CONFLICT = "Holding was modified concurrently (version conflict)"
    """Stored version differs from the version the caller last read."""


class ConcurrentModificationError(Exception):
    """Raised when a holding write loses an optimistic concurrency check.

    Attributes:
        holding_id: Holding that failed to save.
        expected_version: Version the writer based its change on.
        actual_version: Version found in storage (None if unknown).
    """

    def __init__(
        self,
        holding_id: UUID,
        expected_version: int,
        actual_version: int | None = None,
    ) -> None:
        super().__init__(
            f"Holding {holding_id} version conflict: expected {expected_version}, "
            f"found {actual_version if actual_version is not None else 'unknown'}"
        )
        self.holding_id = holding_id
        self.expected_version = expected_version
        self.actual_version = actual_version
