"""Discriminated union describing how a tagging attempt ended.

TagSucceeded | TagUnstable | TagFailed follow the NonIdealState pattern:
the non-ideal variants expose `error_type` and `message`.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class TagSucceeded:
    """Tagging ran (or was deliberately skipped).

    Attributes:
        skipped_reason: Why tagging was skipped, or None if the command ran
    """

    skipped_reason: str | None = None

    @property
    def skipped(self) -> bool:
        return self.skipped_reason is not None


@dataclass(frozen=True)
class TagUnstable:
    """The cvs command ran but exited non-zero; the build is degraded to unstable."""

    exit_code: int

    @property
    def error_type(self) -> str:
        return "tag-command-failed"

    @property
    def message(self) -> str:
        return f"Tag command failed with exit code {self.exit_code}; build marked unstable"


@dataclass(frozen=True)
class TagFailed:
    """Tagging could not be carried out."""

    cause: str

    @property
    def error_type(self) -> str:
        return "tagging-failed"

    @property
    def message(self) -> str:
        return f"Tagging failed: {self.cause}"


ExecutionOutcome = TagSucceeded | TagUnstable | TagFailed
