"""Weight & balance exceptions."""


class WeightBalanceError(Exception):
    """Base exception for all weight & balance errors."""


class InvalidInputError(WeightBalanceError, ValueError):
    """Raised when a measure, limit or setting is rejected at construction."""


class DivisionByZeroError(WeightBalanceError, ZeroDivisionError):
    """Raised when a center of gravity is requested for a zero total mass."""

    def __init__(self, callsign: str):
        self.callsign = callsign
        super().__init__(f"{callsign}: total mass is zero, center of gravity is undefined")


class RenderingError(WeightBalanceError):
    """Raised when a plot cannot be produced for the requested window."""
