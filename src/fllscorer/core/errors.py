"""Exceptions raised for physically impossible mission states."""

from .enums import MissionGroup


class ScoringError(ValueError):
    """Base exception for a missions state that cannot be scored."""

    def __init__(self, group: MissionGroup, message: str):
        self.group = group
        self.message = message
        super().__init__(f"{group.value}: {message}")


class InvalidValueError(ScoringError):
    """A quantity is out of its physical range, like too many methanes."""

    def __init__(self, group: MissionGroup, message: str = "invalid value"):
        super().__init__(group, message)


class CannotScoreBothError(ScoringError):
    """Two outcomes of the same mission were reported at once."""

    def __init__(self, group: MissionGroup, message: str = "cannot score both"):
        super().__init__(group, message)
