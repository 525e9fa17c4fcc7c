"""Run configuration."""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ubiquitous_variants.constants import DEFAULT_ANNOTATION_FIELD, DEFAULT_THRESHOLD, MIN_SAMPLE_FILES
from ubiquitous_variants.exceptions import ArgumentError


class RunSettings(BaseModel):
    """Validated settings for one run. Checked before any sample file is opened."""

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "bcf_paths": ["sample1.bcf", "sample2.bcf", "sample3.bcf"],
                "threshold": 0.7,
                "annotation_field": "ANN",
                "sort": True,
            }
        },
    )

    bcf_paths: list[Path] = Field(..., description="Sample variant call files")
    threshold: float = Field(DEFAULT_THRESHOLD, description="Prevalence threshold in [0, 1)")
    annotation_field: str = Field(DEFAULT_ANNOTATION_FIELD, description="INFO key holding transcript annotations")
    sort: bool = Field(True, description="Order results by gene and protein change")

    @field_validator("bcf_paths")
    @classmethod
    def validate_bcf_paths(cls, v: list[Path]) -> list[Path]:
        if len(v) < MIN_SAMPLE_FILES:
            raise ValueError("You need to specify at least two bcf files to analyse.")
        return v

    @field_validator("threshold")
    @classmethod
    def validate_threshold(cls, v: float) -> float:
        if not 0.0 <= v < 1.0:
            raise ValueError("Threshold must be a float between 0 and 1.")
        return v

    @field_validator("annotation_field")
    @classmethod
    def validate_annotation_field(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Annotation field name must not be empty.")
        return v

    @property
    def sample_count(self) -> int:
        return len(self.bcf_paths)

    @classmethod
    def from_arguments(cls, **kwargs) -> "RunSettings":
        """Build settings, raising ArgumentError with the validation messages on failure."""
        try:
            return cls(**kwargs)
        except ValidationError as e:
            messages = [error["msg"].removeprefix("Value error, ") for error in e.errors()]
            raise ArgumentError(" ".join(messages)) from e
