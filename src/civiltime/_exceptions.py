from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from civiltime.civil import CivilTime


class CivilTimeError(Exception):
    """Base class for recoverable errors raised by civiltime."""


class ClockError(CivilTimeError):
    """The platform could not represent or convert a time."""


class ResolutionError(CivilTimeError):
    """
    UTC resolution did not converge within one second-unit of the
    corrected timestamp.
    """

    def __init__(self, target: CivilTime, timestamp: int) -> None:
        self.target = target
        self.timestamp = timestamp
        super().__init__(
            f"Could not resolve {target} to a UTC timestamp; "
            f"last candidate was {timestamp}."
        )
