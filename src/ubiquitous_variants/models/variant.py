"""Variant identity model."""

from pydantic import BaseModel, ConfigDict, Field


class VariantIdentity(BaseModel):
    """A (gene, protein change) pair taken from a canonical transcript annotation.

    Values are kept as raw bytes so identities compare exactly as they appear in
    the sample files. The model is frozen, so identities hash by value and can be
    used in sets and as mapping keys.
    """

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "gene": "TP53",
                "protein_change": "p.Arg175His",
            }
        },
    )

    gene: bytes = Field(..., min_length=1, description="Gene symbol (e.g., TP53)")
    protein_change: bytes = Field(..., min_length=1, description="HGVSp notation without transcript prefix (e.g., p.Arg175His)")

    @property
    def gene_text(self) -> str:
        return self.gene.decode("utf-8", errors="replace")

    @property
    def protein_change_text(self) -> str:
        return self.protein_change.decode("utf-8", errors="replace")

    def sort_key(self) -> tuple[bytes, bytes]:
        return (self.gene, self.protein_change)

    def __str__(self) -> str:
        return f"{self.gene_text}:{self.protein_change_text}"
