"""
Project Domain - Projects and their completion criteria.

This domain handles:
- The fixed list of completion criteria (documentation, materials, approvals)
- Calculating the derived progress percentage
"""

from .criteria import calculate_progress, criteria_breakdown

__all__ = ['calculate_progress', 'criteria_breakdown']
