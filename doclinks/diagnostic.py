"""Data models for non-fatal problems found while resolving links."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Diagnostic:
    """Represents one recoverable failure recorded during a run."""

    code: str  # type-parse, missing-tutorial, missing-argument
    message: str
    subject: str = ""
    severity: str = "error"
