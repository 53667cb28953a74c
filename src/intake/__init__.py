"""Raw input parsing for scholarship applications."""

from src.intake.validation import CandidateInputError, InputErrorCode, candidate_from_mapping

__all__ = ["CandidateInputError", "InputErrorCode", "candidate_from_mapping"]
