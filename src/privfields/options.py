"""Parser configuration."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Mapping, Union

LATEST_ECMA_VERSION = 13


@dataclass
class Options:
    """Settings recognised by the lexer and parser.

    ecma_version accepts an edition number (6, 7, ...) or a year
    (2015, 2016, ...) and is normalised to the edition number.
    allow_reserved="never" additionally rejects reserved words used as
    property names and private names.
    """
    ecma_version: int = 2022
    allow_reserved: Union[bool, str] = True
    source_type: str = "script"

    def __post_init__(self):
        if self.ecma_version >= 2015:
            self.ecma_version -= 2009
        if not 6 <= self.ecma_version <= LATEST_ECMA_VERSION:
            raise ValueError(
                f"Unsupported ecma_version {self.ecma_version}: classes need "
                f"6 (2015) through {LATEST_ECMA_VERSION} ({LATEST_ECMA_VERSION + 2009})")
        if self.allow_reserved not in (True, False, "never"):
            raise ValueError(
                f"allow_reserved must be True, False or 'never', got {self.allow_reserved!r}")
        if self.source_type not in ("script", "module"):
            raise ValueError(
                f"source_type must be 'script' or 'module', got {self.source_type!r}")

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any] | None) -> Options:
        """Build options from a settings mapping, ignoring unknown keys."""
        if not mapping:
            return cls()
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in mapping.items() if k in known})
