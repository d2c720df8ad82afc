"""
Shared Value Objects used across multiple domains.

Value Objects are immutable objects that describe characteristics of a thing.
Two value objects are equal if all their properties are equal.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum


# =============================================================================
# ENUMERATIONS
# =============================================================================

class ProjectCriterion(str, Enum):
    """
    Completion criteria of a project.

    Order of members is the display order (sidebar status dots).
    """

    DOCUMENTATION_DONE = "documentation_done"
    MATERIALS_ORDERED = "materials_ordered"
    MATERIALS_RECEIVED = "materials_received"
    DESIGN_APPROVED = "design_approved"
    QUALITY_CHECKED = "quality_checked"
    CLIENT_APPROVED = "client_approved"

    @property
    def label(self) -> str:
        labels = {
            ProjectCriterion.DOCUMENTATION_DONE: "Documentation Complete",
            ProjectCriterion.MATERIALS_ORDERED: "Materials Ordered",
            ProjectCriterion.MATERIALS_RECEIVED: "Materials Received",
            ProjectCriterion.DESIGN_APPROVED: "Design Approved",
            ProjectCriterion.QUALITY_CHECKED: "Quality Checked",
            ProjectCriterion.CLIENT_APPROVED: "Client Approved",
        }
        return labels[self]

    @classmethod
    def keys(cls) -> list[str]:
        return [c.value for c in cls]


class MaterialStatus(str, Enum):
    """
    Lifecycle of a missing material.

    missing -> quoted -> ordered, with a way back to missing
    (e.g. an order was cancelled).
    """

    MISSING = "missing"                  # Отсутствует
    QUOTED = "quoted"                    # Запрошено КП
    ORDERED = "ordered"                  # Заказано

    @property
    def allowed_transitions(self) -> tuple[MaterialStatus, ...]:
        mapping = {
            MaterialStatus.MISSING: (MaterialStatus.QUOTED, MaterialStatus.ORDERED),
            MaterialStatus.QUOTED: (MaterialStatus.ORDERED, MaterialStatus.MISSING),
            MaterialStatus.ORDERED: (MaterialStatus.MISSING,),
        }
        return mapping[self]

    def can_transition_to(self, target: MaterialStatus) -> bool:
        return target in self.allowed_transitions


# =============================================================================
# VALUE OBJECTS
# =============================================================================

@dataclass(frozen=True)
class Progress:
    """
    Value object representing progress percentage.
    """

    percent: int

    def __post_init__(self):
        if not (0 <= self.percent <= 100):
            raise ValueError("Progress must be between 0 and 100")

    @classmethod
    def zero(cls) -> Progress:
        return cls(0)

    @classmethod
    def complete(cls) -> Progress:
        return cls(100)

    @classmethod
    def from_counts(cls, completed: int, total: int) -> Progress:
        """Whole-number percentage of completed out of total (0 when total is 0)."""
        if total <= 0:
            return cls.zero()
        # round-half-up, 0.5 must not be rounded to even
        return cls(int(completed * 100 / total + 0.5))

    @property
    def is_complete(self) -> bool:
        return self.percent >= 100

    def __str__(self) -> str:
        return f"{self.percent}%"
