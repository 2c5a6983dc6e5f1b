"""
Shared Grade Scale
==================
Single source of truth for percentage-to-letter thresholds.
Used by grading.py and by the grade summary endpoint.

Thresholds are checked top to bottom; the first one the percentage
reaches wins.
"""

# (minimum percentage, letter)
GRADE_THRESHOLDS = [
    (90, "A+"),
    (80, "A"),
    (70, "B+"),
    (60, "B"),
    (50, "C+"),
    (40, "C"),
]

FAILING_GRADE = "F"

# Every letter a record can carry, best first
GRADE_LETTERS = [letter for _, letter in GRADE_THRESHOLDS] + [FAILING_GRADE]
