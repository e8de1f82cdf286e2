"""Round-trip laws between naturals and trees."""

from __future__ import annotations

from binary_counter.core.invariants import (
    check_canonical_form,
    check_conversion_agreement,
    check_round_trip,
)
from binary_counter.core.tree import BinTree


class RoundTripLaw:
    """to_natural(to_binary(n)) == n for every natural n."""

    name = "round_trip"
    domain = "natural"

    def check(self, sample: int) -> list[str]:
        return check_round_trip(sample)

    def explain(self) -> str:
        return (
            "Decoding an encoded natural gives it back: "
            "to_natural(to_binary(n)) = n. No normalization is needed in this "
            "direction because to_binary only ever builds canonical trees."
        )


class ConversionAgreementLaw:
    """The direct bit conversion agrees with the increment-chain definition."""

    name = "conversion_agreement"
    domain = "natural"

    def check(self, sample: int) -> list[str]:
        return check_conversion_agreement(sample)

    def explain(self) -> str:
        return (
            "to_binary(n) reads the bits of n directly, yet equals the "
            "primitive-recursive definition increment^n(Zero), and is canonical."
        )


class CanonicalFormLaw:
    """to_binary(to_natural(b)) == normalize(b) for every tree b."""

    name = "canonical_form"
    domain = "tree"

    def check(self, sample: BinTree) -> list[str]:
        return check_canonical_form(sample)

    def explain(self) -> str:
        return (
            "Re-encoding the value of any tree yields its normal form: "
            "to_binary(to_natural(b)) = normalize(b). This links both "
            "converters to the normalizer."
        )
