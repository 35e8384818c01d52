"""Exceptions raised by the health scoring engine."""


class HealthScoringError(Exception):
    """Base class for all health scoring errors."""


class TemporalParseError(HealthScoringError, ValueError):
    """
    A timestamp, calendar date or timezone could not be interpreted.

    Unparseable sessions are never counted as zero minutes.
    """

    def __init__(self, value, reason: str = "invalid value"):
        self.value = value
        self.reason = reason
        super().__init__(f"Cannot parse {value!r}: {reason}")
