"""Default law set checked by LawRunner and the CLI."""

from __future__ import annotations

from binary_counter.laws.base import Law
from binary_counter.laws.homomorphism import DoublingLaw, IncrementLaw
from binary_counter.laws.normalization import IdempotenceLaw, NaiveInverseLaw, ValuePreservingLaw
from binary_counter.laws.round_trip import CanonicalFormLaw, ConversionAgreementLaw, RoundTripLaw


def default_laws() -> list[Law]:
    """All laws, natural-domain first."""
    return [
        RoundTripLaw(),
        ConversionAgreementLaw(),
        IncrementLaw(),
        DoublingLaw(),
        ValuePreservingLaw(),
        IdempotenceLaw(),
        CanonicalFormLaw(),
        NaiveInverseLaw(),
    ]
