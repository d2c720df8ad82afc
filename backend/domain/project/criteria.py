"""
Project Domain - Completion Criteria.

A project is "done" criterion by criterion; its progress is never entered
by hand, it is derived from the share of completed criteria.
"""

from __future__ import annotations
from typing import Mapping

from domain.shared.value_objects import ProjectCriterion, Progress


def calculate_progress(criteria: Mapping[str, bool | None]) -> Progress:
    """
    Calculate project progress from its criteria flags.

    Missing keys and None values count as not completed.
    """
    total = len(ProjectCriterion)
    completed = sum(1 for key in ProjectCriterion.keys() if criteria.get(key) is True)
    return Progress.from_counts(completed, total)


def criteria_breakdown(criteria: Mapping[str, bool | None]) -> list[dict]:
    """Return criteria in display order as ``{key, label, done}`` dicts."""
    return [
        {
            'key': criterion.value,
            'label': criterion.label,
            'done': criteria.get(criterion.value) is True,
        }
        for criterion in ProjectCriterion
    ]
