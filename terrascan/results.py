"""Violation records and the store that collects them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class Violation:
    """A single policy violation found on a resource."""

    rule_name: str = ""
    description: str = ""
    rule_id: str = ""
    severity: str = ""
    category: str = ""
    rule_file: str = ""
    rule_data: Any = None
    resource_name: str = ""
    resource_type: str = ""
    resource_data: Any = None
    file: str = ""
    line_number: int = 0

    def to_dict(self) -> dict[str, Any]:
        """Return the fields that appear in rendered output, in output order."""
        return {
            "rule_name": self.rule_name,
            "description": self.description,
            "rule_id": self.rule_id,
            "severity": self.severity,
            "category": self.category,
            "resource_name": self.resource_name,
            "resource_type": self.resource_type,
            "file": self.file,
            "line": self.line_number,
        }


@dataclass
class ViolationStats:
    """Violation counts broken down by severity."""

    low_count: int = 0
    medium_count: int = 0
    high_count: int = 0
    total_count: int = 0

    def __add__(self, other: ViolationStats) -> ViolationStats:
        if not isinstance(other, ViolationStats):
            return NotImplemented
        return ViolationStats(
            low_count=self.low_count + other.low_count,
            medium_count=self.medium_count + other.medium_count,
            high_count=self.high_count + other.high_count,
            total_count=self.total_count + other.total_count,
        )

    def to_dict(self) -> dict[str, int]:
        """Return the counts keyed as in rendered output."""
        return {
            "low": self.low_count,
            "medium": self.medium_count,
            "high": self.high_count,
            "total": self.total_count,
        }


@dataclass
class ViolationStore:
    """Collects violations together with their summary counts."""

    violations: list[Violation] = field(default_factory=list)
    count: ViolationStats = field(default_factory=ViolationStats)

    def add_result(self, violation: Violation) -> None:
        """Append a violation to the store."""
        self.violations.append(violation)

    def get_results(self) -> list[Violation]:
        """Return all stored violations."""
        return self.violations

    def add(self, extra: ViolationStore) -> ViolationStore:
        """Return a new store holding the violations and counts of both stores."""
        return ViolationStore(
            violations=[*self.violations, *extra.violations],
            count=self.count + extra.count,
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the store as plain data for rendering."""
        return {
            "violations": [violation.to_dict() for violation in self.violations],
            "count": self.count.to_dict(),
        }