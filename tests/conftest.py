"""Pytest configuration and fixtures."""

import pytest

from ubiquitous_variants.utils.logging_config import reset_logging


def make_entry(
    gene: str = "TP53",
    hgvsp: str = "ENSP00000269305.4:p.Arg175His",
    canonical: str = "YES",
    alt_canonical: str = "",
    n_fields: int = 27,
) -> bytes:
    """Build one pipe-delimited ANN entry with the given sub-fields set."""
    fields = [""] * n_fields
    for position, value in ((3, gene), (11, hgvsp), (24, canonical), (26, alt_canonical)):
        if position < n_fields:
            fields[position] = value
    return "|".join(fields).encode()


class FakeRecord:
    """Record stand-in exposing only the annotation lookup."""

    def __init__(self, annotation):
        self._annotation = annotation

    def annotation(self):
        return self._annotation


class FakeReader:
    """In-memory replacement for BcfReader, keyed by sample path."""

    samples: dict = {}

    def __init__(self, path, annotation_field="ANN"):
        self.path = path
        self.annotation_field = annotation_field

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        return None

    def __iter__(self):
        return iter([FakeRecord(ann) for ann in self.samples[str(self.path)]])


@pytest.fixture(autouse=True)
def clean_logging():
    """Drop handlers bound to captured streams between tests."""
    yield
    reset_logging()


@pytest.fixture
def entry():
    """Factory for ANN entries."""
    return make_entry


@pytest.fixture
def fake_reader():
    """FakeReader class with an empty sample registry."""
    FakeReader.samples = {}
    return FakeReader


@pytest.fixture
def tp53_cohort():
    """Three samples; TP53 p.Arg175His in the first two only."""
    tp53 = make_entry()
    kras = make_entry(gene="KRAS", hgvsp="ENSP00000256078.4:p.Gly12Asp")
    braf = make_entry(gene="BRAF", hgvsp="ENSP00000288602.6:p.Val600Glu")
    return {
        "s1.bcf": [(tp53,), (kras,), (tp53,)],
        "s2.bcf": [(tp53,), None],
        "s3.bcf": [(braf,), (kras,)],
    }


@pytest.fixture
def write_vcf(tmp_path):
    """Factory writing a single-contig VCF whose records carry the given ANN values."""
    import pysam

    def _write(name, annotations, field="ANN"):
        path = tmp_path / name
        header = pysam.VariantHeader()
        header.contigs.add("chr1", length=100000)
        header.info.add(field, ".", "String", "Functional annotations")
        with pysam.VariantFile(str(path), "w", header=header) as vcf:
            for i, ann in enumerate(annotations):
                start = 1000 + i * 10
                record = vcf.new_record(contig="chr1", start=start, stop=start + 1, alleles=("A", "G"))
                if ann is not None:
                    record.info[field] = tuple(a.decode() for a in ann)
                vcf.write(record)
        return path

    return _write


@pytest.fixture
def write_raw_vcf(tmp_path):
    """Factory writing a sites-only VCF byte for byte, for annotations pysam cannot encode."""

    def _write(name, annotations, field="ANN"):
        path = tmp_path / name
        lines = [
            b"##fileformat=VCFv4.2",
            b"##contig=<ID=chr1,length=100000>",
            b'##INFO=<ID=' + field.encode() + b',Number=.,Type=String,Description="Functional annotations">',
            b"#CHROM\tPOS\tID\tREF\tALT\tQUAL\tFILTER\tINFO",
        ]
        for i, ann in enumerate(annotations):
            info = field.encode() + b"=" + b",".join(ann)
            lines.append(b"chr1\t%d\t.\tA\tG\t.\t.\t%s" % (1000 + i * 10, info))
        path.write_bytes(b"\n".join(lines) + b"\n")
        return path

    return _write
