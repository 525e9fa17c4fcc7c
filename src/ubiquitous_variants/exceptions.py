"""Exceptions raised while identifying ubiquitous variants.

Every error propagates to the command line, which reports it and exits non-zero.
Nothing is retried: parsing is deterministic.
"""

from pathlib import Path


class UbiquitousVariantsError(Exception):
    """Base exception for all ubiquitous-variants errors."""

    pass


class ArgumentError(UbiquitousVariantsError, ValueError):
    """Raised when run arguments are invalid (too few samples, bad threshold)."""

    pass


class SampleReadError(UbiquitousVariantsError, OSError):
    """Raised when a sample file cannot be opened or decoded."""

    def __init__(self, path: Path | str, reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Could not read sample file {self.path}: {reason}")


class MalformedAnnotationError(UbiquitousVariantsError, ValueError):
    """Raised when a transcript annotation cannot be decoded.

    Covers entries with fewer sub-fields than the schema references, and canonical
    entries with an empty gene symbol. Skipping such records would silently
    undercount prevalence, so the whole run fails instead.
    """

    def __init__(self, message: str, entry: bytes | None = None):
        self.entry = entry
        self.record_index: int | None = None
        self.sample_path: Path | None = None
        super().__init__(message)

    def locate(self, record_index: int, sample_path: Path | str | None = None) -> "MalformedAnnotationError":
        """Attach the record position (1-based) and sample file to the error."""
        self.record_index = record_index
        if sample_path is not None:
            self.sample_path = Path(sample_path)
        return self

    def __str__(self) -> str:
        message = super().__str__()
        location = []
        if self.sample_path is not None:
            location.append(str(self.sample_path))
        if self.record_index is not None:
            location.append(f"record {self.record_index}")
        if location:
            return f"{message} ({', '.join(location)})"
        return message
