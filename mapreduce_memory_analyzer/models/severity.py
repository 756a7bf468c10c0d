"""Severity levels reported by heuristics.

Severities form a closed, totally ordered set:
NONE < LOW < MODERATE < SEVERE < CRITICAL
"""
from enum import IntEnum


class Severity(IntEnum):
    """Ordered verdict level of a heuristic."""

    NONE = 0
    LOW = 1
    MODERATE = 2
    SEVERE = 3
    CRITICAL = 4

    @property
    def label(self) -> str:
        return self.name.capitalize()

    @staticmethod
    def min(*severities: "Severity") -> "Severity":
        """Returns the least severe of the given severities."""
        return Severity(min(severities))

    @staticmethod
    def max(*severities: "Severity") -> "Severity":
        """Returns the most severe of the given severities."""
        return Severity(max(severities))

    @staticmethod
    def get_severity_ascending(
        value: float, low: float, moderate: float, severe: float, critical: float
    ) -> "Severity":
        """Bigger is worse: thresholds must be increasing."""
        if value >= critical:
            return Severity.CRITICAL
        if value >= severe:
            return Severity.SEVERE
        if value >= moderate:
            return Severity.MODERATE
        if value >= low:
            return Severity.LOW
        return Severity.NONE

    @staticmethod
    def get_severity_descending(
        value: float, low: float, moderate: float, severe: float, critical: float
    ) -> "Severity":
        """Smaller is worse: thresholds must be decreasing."""
        if value <= critical:
            return Severity.CRITICAL
        if value <= severe:
            return Severity.SEVERE
        if value <= moderate:
            return Severity.MODERATE
        if value <= low:
            return Severity.LOW
        return Severity.NONE
