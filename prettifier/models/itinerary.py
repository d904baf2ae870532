"""Itinerary domain model."""
import re
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional, Tuple


# ---------------------------------------------------------------------------
# Terminal colour directives (ANSI SGR sequences)
#
# Everything wrapped in these sequences is shown coloured on the console and
# stripped again before the document is written to disk.
# ---------------------------------------------------------------------------

RESET = "\u001B[0m"
BOLD = "\u001B[1m"
CLOCK_EMOJI = "\U0001F552"

# Menu number -> (display name, directive)
COLOR_CODES = {
    1: ("Red", "\u001B[31m"),
    2: ("Green", "\u001B[32m"),
    3: ("Yellow", "\u001B[33m"),
    4: ("Blue", "\u001B[34m"),
    5: ("Purple", "\u001B[35m"),
}

ANSI_PATTERN = re.compile(r"\u001B\[[;\d]*m")


def strip_colors(text: str) -> str:
    """Remove every colour directive from text."""
    return ANSI_PATTERN.sub("", text)


class TokenKind(Enum):
    """Kind of marker recognised in itinerary text."""
    CITY = "CITY"          # *#XXX / *##XXXX
    IATA = "IATA"          # #XXX
    ICAO = "ICAO"          # ##XXXX
    DATE = "D"             # D(...)
    TIME_12H = "T12"       # T12(...)
    TIME_24H = "T24"       # T24(...)

    @property
    def is_code(self) -> bool:
        return self in (TokenKind.CITY, TokenKind.IATA, TokenKind.ICAO)


@dataclass(frozen=True)
class Token:
    """A marker found in a line of text."""
    kind: TokenKind
    raw: str
    payload: str
    span: Tuple[int, int]


@dataclass(frozen=True)
class LookupRow:
    """The four columns of an airport lookup row we care about."""
    icao_code: str
    iata_code: str
    name: str
    municipality: str

    def airport_keys(self) -> List[str]:
        return [f"#{self.iata_code}", f"##{self.icao_code}"]

    def city_keys(self) -> List[str]:
        return [f"*{key}" for key in self.airport_keys()]


@dataclass(frozen=True)
class CodeMapping:
    """
    Read-only code lookup built once from the airport lookup file.

    `airports` is keyed by `#XXX` / `##XXXX`, `cities` by `*#XXX` / `*##XXXX`.
    """
    airports: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    cities: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))

    @classmethod
    def from_rows(cls, rows: Iterable[LookupRow]) -> 'CodeMapping':
        airports: Dict[str, str] = {}
        cities: Dict[str, str] = {}

        for row in rows:
            for key in row.airport_keys():
                airports[key] = row.name
            for key in row.city_keys():
                cities[key] = row.municipality

        return cls(MappingProxyType(airports), MappingProxyType(cities))

    def lookup(self, kind: TokenKind, key: str) -> Optional[str]:
        """Resolve a tagged code for a token kind, None when unknown."""
        if kind == TokenKind.CITY:
            return self.cities.get(key)
        if kind in (TokenKind.IATA, TokenKind.ICAO):
            return self.airports.get(key)
        return None

    def __len__(self) -> int:
        return len(self.airports) + len(self.cities)


@dataclass(frozen=True)
class RenderContext:
    """Display settings threaded through every rendering step."""
    color: str = ""

    def colorize(self, text: str) -> str:
        return f"{self.color}{text}{RESET}"


@dataclass
class FormattedSegment:
    """Replacement text for a single marker."""
    text: str
    note: Optional[str] = None

    def render(self) -> str:
        if self.note:
            return f"{self.text} {self.note}"
        return self.text


@dataclass
class OutputLine:
    """A fully substituted line; `text` keeps the colour directives."""
    text: str

    @property
    def plain(self) -> str:
        return strip_colors(self.text)

    @property
    def is_blank(self) -> bool:
        return not self.text.strip()
