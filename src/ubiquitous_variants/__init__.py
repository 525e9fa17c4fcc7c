"""Ubiquitous variants: find protein changes shared across a cohort of BCF files."""

__version__ = "0.1.0"
