"""
Exceptions raised by the database layer.
Expected conditions (missing records, an unreachable backend) are reported
through return values; these are reserved for caller mistakes.
"""


class InvalidRecordIdError(ValueError):
    """Raised when a record or identifier is missing, blank or not a string."""
    pass


class UnsupportedDatabaseTypeError(ValueError):
    """Raised when the factory is asked for a backend it does not know."""
    pass
