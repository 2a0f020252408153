"""Data models for URL templates, placeholders, and engine configuration."""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import cached_property

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

# Original ASCII ranges: almost every unsafe URL character except [#$%&-=?_ ].
# The space is left out on purpose since it marks word breaks in queries.
DEFAULT_QUERY_UNSAFE_RANGES: tuple[tuple[int, int], ...] = (
    (0x00, 0x1F),
    (0x21, 0x22),
    (0x24, 0x24),
    (0x27, 0x2C),
    (0x3B, 0x3C),
    (0x3E, 0x3E),
    (0x40, 0x40),
    (0x5B, 0x5E),
    (0x60, 0x60),
    (0x7B, 0xFF),
)

_SPACE = 0x20
_LATIN1_MAX = 0xFF


class EngineConfig(BaseModel):
    """Immutable constants shared by every stage of URL substitution."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    entry_delimiter: str = "<|>"
    data_delimiter: str = "<>"
    query_delimiter: str = "%%"
    max_placeholders: int = Field(default=8, ge=1, le=99)
    max_delimiter_length: int = Field(default=7, ge=1)
    query_unsafe_ranges: tuple[tuple[int, int], ...] = DEFAULT_QUERY_UNSAFE_RANGES

    @field_validator("entry_delimiter", "data_delimiter", "query_delimiter")
    @classmethod
    def _delimiter_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("delimiters must contain a non-space character")
        return value

    @field_validator("query_unsafe_ranges")
    @classmethod
    def _ranges_well_formed(cls, value: tuple[tuple[int, int], ...]) -> tuple[tuple[int, int], ...]:
        for low, high in value:
            if low < 0 or low > high:
                raise ValueError(f"invalid unsafe range: {low}-{high}")
            if low <= _SPACE <= high:
                raise ValueError("space must not be an unsafe query character")
        return value

    @model_validator(mode="after")
    def _delimiters_distinct(self) -> EngineConfig:
        delimiters = {self.entry_delimiter, self.data_delimiter, self.query_delimiter}
        if len(delimiters) != 3:
            raise ValueError("entry, data and query delimiters must differ")
        return self

    @cached_property
    def query_unsafe_chars(self) -> frozenset[str]:
        """Latin-1 characters encoded inside search queries."""

        return frozenset(
            chr(code) for low, high in self.query_unsafe_ranges for code in range(low, high + 1)
        )

    @cached_property
    def url_unsafe_chars(self) -> frozenset[str]:
        """Latin-1 characters encoded in literal URL text."""

        return self.query_unsafe_chars | {chr(_SPACE)}


def is_unsafe(char: str, unsafe_chars: frozenset[str]) -> bool:
    """Return True when char must be percent-encoded."""

    return char in unsafe_chars or ord(char) > _LATIN1_MAX


@dataclass(frozen=True)
class UrlEntry:
    """One URL template and its opaque data suffix."""

    url: str
    data: str | None = None


@dataclass(frozen=True)
class PlaceholderToken:
    """A `{search<options>\\<delimiter>}` match and the text before it."""

    preceding_text: str
    option_string: str
    delimiter: str
    occurrence_index: int
    text: str


@dataclass(frozen=True)
class AllWords:
    """Uppercase every word of the query."""


@dataclass(frozen=True)
class Positions:
    """Uppercase only the words at these 0-based positions."""

    indexes: tuple[int, ...] = ()


UpperCaseSpec = AllWords | Positions


@dataclass(frozen=True)
class OptionSet:
    """Parsed options of a single placeholder."""

    query_position: int | None = None
    word_positions: tuple[int, ...] = ()
    uppercase: UpperCaseSpec = field(default_factory=Positions)
    capitalize: bool = False
    reverse: bool = False
    strip_commas: bool = False


@dataclass
class ScanResult:
    """Placeholders of one URL in scan order plus the trailing literal text."""

    tokens: list[PlaceholderToken] = field(default_factory=list)
    trailing_text: str = ""
