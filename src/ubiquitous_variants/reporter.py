"""Threshold filtering of cohort prevalence."""

import logging

import numpy as np

from ubiquitous_variants.aggregation import GlobalCountTable
from ubiquitous_variants.exceptions import ArgumentError
from ubiquitous_variants.models.report import UbiquitousVariant, prevalence_ratio

logger = logging.getLogger(__name__)


class ThresholdReporter:
    """Selects variants whose prevalence ratio is strictly above a threshold.

    ratio = count / total_samples, computed and compared in single precision.
    A variant exactly at the threshold is excluded. With sort=True results are
    ordered by (gene, protein change); otherwise they follow the table's
    iteration order, which carries no meaning.
    """

    def __init__(self, threshold: float, sort: bool = True):
        if not 0.0 <= threshold < 1.0:
            raise ArgumentError("Threshold must be a float between 0 and 1.")
        self.threshold = threshold
        self._threshold32 = np.float32(threshold)
        self.sort = sort

    def report(self, table: GlobalCountTable, total_samples: int) -> list[UbiquitousVariant]:
        if total_samples < 1:
            raise ArgumentError("At least one sample is required to compute prevalence ratios.")

        qualifying = []
        for identity, count in table:
            if prevalence_ratio(count, total_samples) > self._threshold32:
                qualifying.append((identity, count))

        if self.sort:
            qualifying.sort(key=lambda item: item[0].sort_key())

        logger.info(
            f"{len(qualifying)} of {len(table)} variants exceed prevalence threshold {self.threshold}"
        )
        return [UbiquitousVariant.from_identity(identity, count, total_samples) for identity, count in qualifying]
