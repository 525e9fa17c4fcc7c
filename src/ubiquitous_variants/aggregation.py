"""Cohort-wide prevalence counts."""

from collections import defaultdict
from collections.abc import Iterable, Iterator

from ubiquitous_variants.models.variant import VariantIdentity


class GlobalCountTable:
    """Counts, per (gene, protein change), the number of samples carrying it.

    Each merged sample increments an identity at most once, so every count stays
    within [0, samples_merged]. Merging is commutative and associative: the final
    table does not depend on sample order.
    """

    def __init__(self):
        self._counts: defaultdict[bytes, defaultdict[bytes, int]] = defaultdict(lambda: defaultdict(int))
        self.samples_merged = 0

    def merge(self, pairs: Iterable[VariantIdentity]) -> "GlobalCountTable":
        """Fold one sample's identities into the table."""
        for identity in set(pairs):
            self._counts[identity.gene][identity.protein_change] += 1
        self.samples_merged += 1
        return self

    def combine(self, other: "GlobalCountTable") -> "GlobalCountTable":
        """Return a new table holding the sum of this table and another."""
        combined = GlobalCountTable()
        for table in (self, other):
            for identity, count in table:
                combined._counts[identity.gene][identity.protein_change] += count
        combined.samples_merged = self.samples_merged + other.samples_merged
        return combined

    def count(self, identity: VariantIdentity) -> int:
        by_change = self._counts.get(identity.gene)
        if by_change is None:
            return 0
        return by_change.get(identity.protein_change, 0)

    def genes(self) -> list[bytes]:
        return list(self._counts)

    def __iter__(self) -> Iterator[tuple[VariantIdentity, int]]:
        for gene, by_change in self._counts.items():
            for protein_change, count in by_change.items():
                yield VariantIdentity(gene=gene, protein_change=protein_change), count

    def __len__(self) -> int:
        return sum(len(by_change) for by_change in self._counts.values())

    def __contains__(self, identity: object) -> bool:
        return isinstance(identity, VariantIdentity) and self.count(identity) > 0
