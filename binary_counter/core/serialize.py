"""JSON import/export helpers.

Trees are written inside a versioned envelope:

  {"format_version": "1.0", "digits": "101", "depth": 3}

The digit string is authoritative; the tree is rebuilt from it on load.
A flat string keeps the envelope independent of tree depth, where a
nested model dump would hit pydantic's serialization depth limit.
"""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError, model_validator

from binary_counter.core.notation import format_digits, parse_digits
from binary_counter.core.tree import BinTree

SUPPORTED_VERSION = "1.0"


class TreeEnvelopeError(ValueError):
    """Raised when a tree envelope fails validation."""


class TreeEnvelope(BaseModel):
    """On-disk form of a tree."""

    model_config = {"frozen": True, "extra": "forbid"}

    format_version: str = SUPPORTED_VERSION
    digits: str = Field(pattern=r"^[01]*$")
    depth: int = Field(ge=0)

    @model_validator(mode="after")
    def _depth_matches_digits(self) -> "TreeEnvelope":
        if self.depth != len(self.digits):
            raise ValueError(
                f"depth {self.depth} and digits (length {len(self.digits)}) disagree"
            )
        return self


def tree_to_dict(tree: BinTree) -> dict:
    """Envelope dict for *tree*."""
    digits = format_digits(tree)
    envelope = TreeEnvelope(digits=digits, depth=len(digits))
    return envelope.model_dump(mode="json")


def tree_from_dict(data: dict) -> BinTree:
    """Validate an envelope dict and return its tree."""
    if not isinstance(data, dict):
        raise TreeEnvelopeError(f"Expected an object, got {type(data).__name__}")
    version = data.get("format_version")
    if version != SUPPORTED_VERSION:
        raise TreeEnvelopeError(
            f"Unsupported format_version {version!r} (expected {SUPPORTED_VERSION!r})"
        )
    missing = {"digits", "depth"} - data.keys()
    if missing:
        raise TreeEnvelopeError(f"Missing fields {sorted(missing)}")
    try:
        envelope = TreeEnvelope.model_validate(data)
    except ValidationError as e:
        raise TreeEnvelopeError(f"Invalid envelope: {e}") from e
    return parse_digits(envelope.digits)


def tree_to_json(tree: BinTree) -> str:
    """Serialize *tree* to a JSON envelope string."""
    return json.dumps(tree_to_dict(tree), indent=2, sort_keys=True)


def tree_from_json(json_str: str) -> BinTree:
    """Deserialize a tree from a JSON envelope string."""
    try:
        data = json.loads(json_str)
    except json.JSONDecodeError as e:
        raise TreeEnvelopeError(f"Malformed JSON: {e}") from e
    return tree_from_dict(data)


def export_tree(tree: BinTree, path: str | Path) -> None:
    """Write *tree* to a JSON file."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(tree_to_json(tree))


def import_tree(path: str | Path) -> BinTree:
    """Read a tree from a JSON file."""
    path = Path(path)
    return tree_from_json(path.read_text())


def export_dict(data: dict, path: str | Path) -> None:
    """Write arbitrary dict as JSON."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2, default=str))
