"""Feedback channel over Target's archive tables."""

from __future__ import annotations

from .channel import (
    FeedbackBatch,
    PartFeedback,
    ProgramFeedback,
    ProgramRemnantFeedback,
    ProgramSheetFeedback,
    extract_part_feedback,
    extract_program_feedback,
    extract_program_remnants,
    extract_program_sheets,
)
from .retention import (
    DEFAULT_RETENTION,
    RetentionPolicy,
    RetentionResult,
    RetentionRule,
    apply_retention,
)

__all__ = [
    "DEFAULT_RETENTION",
    "FeedbackBatch",
    "PartFeedback",
    "ProgramFeedback",
    "ProgramRemnantFeedback",
    "ProgramSheetFeedback",
    "RetentionPolicy",
    "RetentionResult",
    "RetentionRule",
    "apply_retention",
    "extract_part_feedback",
    "extract_program_feedback",
    "extract_program_remnants",
    "extract_program_sheets",
]
