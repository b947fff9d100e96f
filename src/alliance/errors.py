"""Error taxonomy for the scoring and valuation engines."""

from __future__ import annotations


class AllianceError(Exception):
    """Base exception for the alliance engines."""

    pass


class InvalidInput(AllianceError, ValueError):
    """Raised when a caller supplies a value outside its allowed domain."""

    pass


class InvalidLevel(InvalidInput):
    """Raised when a tier level is not present in its lookup table."""

    def __init__(self, table: str, level: object):
        self.table = table
        self.level = level
        super().__init__(f"Unknown {table} level: {level!r}")


class InvalidDimension(AllianceError, ValueError):
    """Raised when ranking is requested on an unknown alignment dimension."""

    def __init__(self, dimension: object):
        self.dimension = dimension
        super().__init__(f"Unknown alignment dimension: {dimension!r}")
