"""Canonical transcript selection from ANN annotation fields.

ARCHITECTURE:
    ANN entries → TranscriptEntry (named sub-fields) → first canonical entry → (gene, HGVSp)

A record's annotation field lists one pipe-delimited entry per overlapping transcript.
The parser walks the entries in the order given and stops at the first one flagged as
canonical, either by the canonical flag (``YES``) or by a non-empty alternate
canonical indicator. Field order breaks ties, not which flag matched.

Key Design:
- Sub-fields are read by role name, never by bare index
- Entries too short for the schema raise MalformedAnnotationError instead of IndexError
- A canonical entry without a gene symbol is malformed
- A canonical entry without a protein change is a normal outcome: no identity
"""

from collections.abc import Sequence

from ubiquitous_variants.constants import (
    ANN_FIELD_POSITIONS,
    ANN_FIELD_SEPARATOR,
    CANONICAL_FLAG,
    HGVSP_SEPARATOR,
    MIN_ANN_SUBFIELDS,
)
from ubiquitous_variants.exceptions import MalformedAnnotationError
from ubiquitous_variants.models.variant import VariantIdentity

AnnotationValue = bytes | str
AnnotationField = Sequence[AnnotationValue] | None


def _as_bytes(value: AnnotationValue) -> bytes:
    if isinstance(value, str):
        return value.encode("utf-8")
    return bytes(value)


class TranscriptEntry:
    """One transcript's annotation, decoded into its pipe-delimited sub-fields."""

    def __init__(self, raw: AnnotationValue):
        self.raw = _as_bytes(raw)
        self.subfields = self.raw.split(ANN_FIELD_SEPARATOR)

    def __len__(self) -> int:
        return len(self.subfields)

    def field(self, role: str) -> bytes:
        """Return the sub-field for a schema role (gene, hgvsp, canonical, alt_canonical)."""
        position = ANN_FIELD_POSITIONS[role]
        if position >= len(self.subfields):
            raise MalformedAnnotationError(
                f"Annotation entry has {len(self.subfields)} sub-fields, "
                f"'{role}' is expected at position {position}",
                entry=self.raw,
            )
        return self.subfields[position]

    def validate(self) -> None:
        """Ensure every referenced sub-field is present."""
        if len(self.subfields) < MIN_ANN_SUBFIELDS:
            raise MalformedAnnotationError(
                f"Annotation entry has {len(self.subfields)} sub-fields, "
                f"at least {MIN_ANN_SUBFIELDS} are required",
                entry=self.raw,
            )

    @property
    def gene(self) -> bytes:
        return self.field("gene")

    @property
    def hgvsp(self) -> bytes:
        return self.field("hgvsp")

    @property
    def is_canonical(self) -> bool:
        return self.field("canonical") == CANONICAL_FLAG or bool(self.field("alt_canonical"))

    @property
    def protein_change(self) -> bytes | None:
        """HGVSp with its transcript prefix stripped, or None when empty."""
        hgvsp = self.hgvsp
        if not hgvsp:
            return None
        return hgvsp.split(HGVSP_SEPARATOR)[-1] or None

    def __repr__(self) -> str:
        return f"TranscriptEntry({self.raw!r})"


class AnnotationParser:
    """Selects the canonical transcript of a record and extracts its identity."""

    @staticmethod
    def select_canonical(field: AnnotationField) -> TranscriptEntry | None:
        """Return the first canonical entry in field order, or None.

        Each inspected entry must be long enough for the schema; entries after the
        canonical one are not inspected.
        """
        if field is None:
            return None

        for raw in field:
            entry = TranscriptEntry(raw)
            entry.validate()
            if entry.is_canonical:
                return entry
        return None

    @staticmethod
    def parse(field: AnnotationField) -> tuple[bytes | None, bytes | None]:
        """Return (gene, protein_change) of the canonical entry.

        Returns (None, None) when the field is absent or no entry is canonical.
        protein_change is None when the canonical entry has no HGVSp.

        Raises:
            MalformedAnnotationError: an inspected entry is too short, or the
                canonical entry has an empty gene symbol
        """
        entry = AnnotationParser.select_canonical(field)
        if entry is None:
            return None, None

        gene = entry.gene
        if not gene:
            raise MalformedAnnotationError(
                "Canonical annotation entry has an empty gene symbol",
                entry=entry.raw,
            )
        return gene, entry.protein_change

    @staticmethod
    def identity(field: AnnotationField) -> VariantIdentity | None:
        """Return the VariantIdentity of a record, or None if it has none."""
        gene, protein_change = AnnotationParser.parse(field)
        if gene is None or protein_change is None:
            return None
        return VariantIdentity(gene=gene, protein_change=protein_change)
