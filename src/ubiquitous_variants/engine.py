"""Run orchestration.

ARCHITECTURE:
    sample paths → BcfReader → SampleVariantCollector → GlobalCountTable → ThresholdReporter → UbiquityReport

Samples are processed one at a time, in the order given, and each is fully merged
before the next is opened. Any error aborts the run; nothing is reported until
every sample has been read.
"""

import logging
from collections.abc import Callable
from pathlib import Path

from ubiquitous_variants.aggregation import GlobalCountTable
from ubiquitous_variants.collector import SamplePairSet, SampleVariantCollector
from ubiquitous_variants.config import RunSettings
from ubiquitous_variants.models.report import UbiquityReport
from ubiquitous_variants.reader import BcfReader
from ubiquitous_variants.reporter import ThresholdReporter

logger = logging.getLogger(__name__)

ReaderFactory = Callable[[Path, str], BcfReader]


class UbiquityEngine:
    """Identifies variants shared by more than a threshold fraction of samples."""

    def __init__(self, settings: RunSettings, reader_factory: ReaderFactory = BcfReader):
        self.settings = settings
        self.reader_factory = reader_factory
        self.collector = SampleVariantCollector()
        self.reporter = ThresholdReporter(settings.threshold, sort=settings.sort)

    def gather_sample(self, path: Path) -> SamplePairSet:
        """Read every record of one sample and return its unique identities."""
        with self.reader_factory(path, self.settings.annotation_field) as reader:
            return self.collector.collect(reader, sample_path=path)

    def build_table(self) -> GlobalCountTable:
        table = GlobalCountTable()
        for i, path in enumerate(self.settings.bcf_paths, start=1):
            logger.info(f"[{i}/{self.settings.sample_count}] Reading {path}")
            pairs = self.gather_sample(path)
            table.merge(pairs)
            logger.debug(f"{path}: merged {len(pairs)} variants, table now holds {len(table)}")
        return table

    def run(self) -> UbiquityReport:
        table = self.build_table()
        variants = self.reporter.report(table, self.settings.sample_count)
        return UbiquityReport(
            total_samples=self.settings.sample_count,
            threshold=self.settings.threshold,
            sample_paths=[str(p) for p in self.settings.bcf_paths],
            variants=variants,
        )
