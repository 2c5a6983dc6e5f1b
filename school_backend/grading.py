"""
Percentage and letter-grade calculation for grade records.
"""
import math
from typing import NamedTuple

from .grade_scale import GRADE_THRESHOLDS, FAILING_GRADE


class GradeResult(NamedTuple):
    percentage: int
    grade: str


def round_half_up(value):
    """Round to the nearest integer, with halves going up (0.5 -> 1)."""
    return int(math.floor(value + 0.5))


def letter_for(percentage):
    """Map a percentage onto the grade scale."""
    for minimum, letter in GRADE_THRESHOLDS:
        if percentage >= minimum:
            return letter
    return FAILING_GRADE


def calculate(marks, total_marks):
    """
    Compute the rounded percentage and letter grade for marks out of total_marks.

    total_marks must be nonzero; a zero total raises ZeroDivisionError.
    """
    percentage = round_half_up(marks / total_marks * 100)
    return GradeResult(percentage, letter_for(percentage))
