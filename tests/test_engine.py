"""Tests for run orchestration."""

import pytest

from tests.conftest import make_entry
from ubiquitous_variants.config import RunSettings
from ubiquitous_variants.engine import UbiquityEngine
from ubiquitous_variants.exceptions import MalformedAnnotationError
from ubiquitous_variants.models.variant import VariantIdentity

TP53 = VariantIdentity(gene=b"TP53", protein_change=b"p.Arg175His")


class TestUbiquityEngine:
    """Tests for UbiquityEngine with an in-memory reader."""

    def test_end_to_end_above_threshold(self, fake_reader, tp53_cohort):
        """Test TP53 in 2 of 3 samples passes threshold 0.5."""
        fake_reader.samples = tp53_cohort
        settings = RunSettings(bcf_paths=["s1.bcf", "s2.bcf", "s3.bcf"], threshold=0.5)
        report = UbiquityEngine(settings, reader_factory=fake_reader).run()

        assert report.total_samples == 3
        assert 'Gene: "TP53", HGVSP: "p.Arg175His", Variant Count: 2, Ratio: 0.6666667' in report.to_lines()

    def test_end_to_end_below_threshold(self, fake_reader, tp53_cohort):
        """Test TP53 in 2 of 3 samples does not pass threshold 0.7."""
        fake_reader.samples = tp53_cohort
        settings = RunSettings(bcf_paths=["s1.bcf", "s2.bcf", "s3.bcf"], threshold=0.7)
        report = UbiquityEngine(settings, reader_factory=fake_reader).run()

        assert "TP53" not in [v.gene for v in report.variants]

    def test_table_counts_once_per_sample(self, fake_reader, tp53_cohort):
        """Test duplicated records in one sample count once."""
        fake_reader.samples = tp53_cohort
        settings = RunSettings(bcf_paths=["s1.bcf", "s2.bcf", "s3.bcf"])
        table = UbiquityEngine(settings, reader_factory=fake_reader).build_table()

        assert table.count(TP53) == 2
        assert table.count(VariantIdentity(gene=b"KRAS", protein_change=b"p.Gly12Asp")) == 2
        assert table.samples_merged == 3

    def test_gather_sample(self, fake_reader, tp53_cohort):
        """Test a single sample's unique identities."""
        fake_reader.samples = tp53_cohort
        settings = RunSettings(bcf_paths=["s1.bcf", "s2.bcf"])
        pairs = UbiquityEngine(settings, reader_factory=fake_reader).gather_sample("s2.bcf")

        assert pairs == frozenset({TP53})

    def test_malformed_sample_aborts_run(self, fake_reader, tp53_cohort):
        """Test a malformed record in a later sample fails the whole run."""
        fake_reader.samples = dict(tp53_cohort, **{"bad.bcf": [(make_entry(n_fields=24),)]})
        settings = RunSettings(bcf_paths=["s1.bcf", "bad.bcf"])

        with pytest.raises(MalformedAnnotationError, match="bad.bcf"):
            UbiquityEngine(settings, reader_factory=fake_reader).run()
