"""Data models for ubiquitous variant identification."""

from ubiquitous_variants.models.report import UbiquitousVariant, UbiquityReport
from ubiquitous_variants.models.variant import VariantIdentity

__all__ = [
    "VariantIdentity",
    "UbiquitousVariant",
    "UbiquityReport",
]
