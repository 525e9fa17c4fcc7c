"""Per-sample collection of unique variant identities."""

import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Protocol

from ubiquitous_variants.annotation import AnnotationParser
from ubiquitous_variants.exceptions import MalformedAnnotationError
from ubiquitous_variants.models.variant import VariantIdentity

logger = logging.getLogger(__name__)

SamplePairSet = frozenset[VariantIdentity]


class AnnotatedRecord(Protocol):
    def annotation(self) -> tuple[bytes, ...] | None: ...


class SampleVariantCollector:
    """Gathers the set of canonical (gene, protein change) pairs of one sample.

    A pair seen in several records of the same sample is kept once. Records
    without a canonical protein change are skipped; a malformed record aborts
    the sample with MalformedAnnotationError.
    """

    def __init__(self, parser: AnnotationParser | None = None):
        self.parser = parser or AnnotationParser()

    def collect(self, records: Iterable[AnnotatedRecord], sample_path: Path | str | None = None) -> SamplePairSet:
        pairs: set[VariantIdentity] = set()
        n_records = 0
        n_skipped = 0

        for index, record in enumerate(records, start=1):
            n_records = index
            try:
                identity = self.parser.identity(record.annotation())
            except MalformedAnnotationError as e:
                e.locate(index, sample_path)
                raise

            if identity is None:
                n_skipped += 1
                continue
            pairs.add(identity)

        logger.debug(
            f"{sample_path or 'sample'}: {n_records} records, {n_skipped} without canonical "
            f"protein change, {len(pairs)} unique variants"
        )
        return frozenset(pairs)
