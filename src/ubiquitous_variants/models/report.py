"""Result models for a ubiquitous variant run."""

import numpy as np
from pydantic import BaseModel, Field

from ubiquitous_variants.models.variant import VariantIdentity


def prevalence_ratio(count: int, total_samples: int) -> np.float32:
    """Return count / total_samples in single precision."""
    return np.float32(count) / np.float32(total_samples)


def _quote(text: str) -> str:
    """Render text double-quoted, escaping backslashes and quotes."""
    escaped = text.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


class UbiquitousVariant(BaseModel):
    """A variant whose prevalence ratio exceeds the threshold."""

    gene: str
    protein_change: str
    count: int = Field(..., ge=0, description="Number of samples carrying the variant")
    ratio: float = Field(..., ge=0.0, le=1.0, description="count / total samples")

    @classmethod
    def from_identity(cls, identity: VariantIdentity, count: int, total_samples: int) -> "UbiquitousVariant":
        return cls(
            gene=identity.gene_text,
            protein_change=identity.protein_change_text,
            count=count,
            ratio=float(prevalence_ratio(count, total_samples)),
        )

    def format_ratio(self) -> str:
        """Shortest single-precision rendering (0.6666667, 0.33333334, 1)."""
        return np.format_float_positional(np.float32(self.ratio), trim="-")

    def to_line(self) -> str:
        """Format as a single output line."""
        return (
            f"Gene: {_quote(self.gene)}, HGVSP: {_quote(self.protein_change)}, "
            f"Variant Count: {self.count}, Ratio: {self.format_ratio()}"
        )


class UbiquityReport(BaseModel):
    """Outcome of one run across all sample files."""

    total_samples: int = Field(..., ge=1)
    threshold: float
    sample_paths: list[str] = Field(default_factory=list)
    variants: list[UbiquitousVariant] = Field(default_factory=list)

    def has_variants(self) -> bool:
        return bool(self.variants)

    def to_lines(self) -> list[str]:
        return [variant.to_line() for variant in self.variants]
