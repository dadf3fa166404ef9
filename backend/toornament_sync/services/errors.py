"""Exceptions raised when Toornament data cannot be converted."""

from typing import Optional


class ConversionError(Exception):
    """Base exception for conversion errors. The whole conversion is aborted."""
    pass


class UnsupportedStageTypeError(ConversionError):
    """Stage type is not one of pools / single_elimination / double_elimination"""

    def __init__(self, stage_type: str):
        self.stage_type = stage_type
        super().__init__(f"Unsupported stage type: {stage_type!r}")


class UnsupportedMatchStatusError(ConversionError):
    """Match status is not one of pending / running / completed"""

    def __init__(self, status: str):
        self.status = status
        super().__init__(f"Unsupported match status: {status!r}")


class SourceMatchNotFoundError(ConversionError):
    """An opponent's source match has not been converted (yet)."""

    def __init__(self, source_match_id: str, match_id: Optional[str] = None):
        self.source_match_id = source_match_id
        self.match_id = match_id
        message = f"Source match {source_match_id!r} not found"
        if match_id is not None:
            message += f" (referenced by match {match_id!r})"
        super().__init__(message)
