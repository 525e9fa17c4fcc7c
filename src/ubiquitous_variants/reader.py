"""Variant file reader.

Wraps pysam.VariantFile so the rest of the package only sees records with an
annotation lookup. BCF, VCF and bgzipped VCF are all accepted.
"""

import logging
from collections.abc import Iterator
from pathlib import Path

import pysam

from ubiquitous_variants.constants import DEFAULT_ANNOTATION_FIELD
from ubiquitous_variants.exceptions import SampleReadError

logger = logging.getLogger(__name__)


class VariantRecord:
    """A single record of a sample file."""

    def __init__(self, record: pysam.VariantRecord, annotation_field: str = DEFAULT_ANNOTATION_FIELD):
        self._record = record
        self.annotation_field = annotation_field

    @property
    def contig(self) -> str:
        return self._record.contig

    @property
    def pos(self) -> int:
        return self._record.pos

    def annotation(self) -> tuple[bytes, ...] | None:
        """Return the annotation entries of this record, or None if the field is unset.

        A field not declared in the header reads as unset. Values that are not valid
        UTF-8 come back as raw bytes; rendering decodes them lossily.
        """
        if self.annotation_field not in self._record.header.info:
            return None
        try:
            value = self._record.info.get(self.annotation_field)
        except UnicodeDecodeError as e:
            value = bytes(e.object)
        if value is None:
            return None
        # Number=1 headers, and undecodable values, hand back the whole comma-joined string
        if isinstance(value, (str, bytes)):
            value = value.split("," if isinstance(value, str) else b",")
        return tuple(v.encode("utf-8") if isinstance(v, str) else bytes(v) for v in value)


class BcfReader:
    """Reads records from one sample file.

    Use with 'with' syntax to ensure the underlying file handle is closed.
    """

    def __init__(self, path: Path | str, annotation_field: str = DEFAULT_ANNOTATION_FIELD):
        self.path = Path(path)
        self.annotation_field = annotation_field
        self._file: pysam.VariantFile | None = None

    def __enter__(self) -> "BcfReader":
        try:
            self._file = pysam.VariantFile(str(self.path))
        except (OSError, ValueError) as e:
            raise SampleReadError(self.path, str(e)) from e

        if self.annotation_field not in self._file.header.info:
            logger.warning(f"{self.path}: INFO field '{self.annotation_field}' is not declared in the header")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self._file is not None:
            self._file.close()
            self._file = None

    def __iter__(self) -> Iterator[VariantRecord]:
        if self._file is None:
            raise RuntimeError("BcfReader must be opened with 'with' before iterating")
        try:
            for record in self._file:
                yield VariantRecord(record, self.annotation_field)
        except (OSError, ValueError) as e:
            raise SampleReadError(self.path, str(e)) from e
