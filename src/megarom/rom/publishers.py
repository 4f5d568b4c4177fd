"""
Publisher Resolution
====================

Maps the company field of a Genesis ROM header to a publisher name.

Licensed third-party publishers identify themselves in the company field
with a numeric code, usually written as "(C)T-50" or "T-50". Sega and a
few unlicensed publishers use a short name instead.

Rule Order
----------
Matching is by substring over the lowercased company field and the first
matching rule wins. Because "120" contains "12", every three-digit code
is listed before the two-digit codes; "120" resolves to Codemasters, not
Capcom. The order of PUBLISHER_RULES must be kept as declared.

One rule matches the copyright line instead of the company code: Hi-Tech
Entertainment releases carry the bare "T-SNK 95-FEB" string.
"""

from dataclasses import dataclass
from typing import Final, Union


UNKNOWN_PUBLISHER: Final = "Unknown"


@dataclass(frozen=True)
class PublisherRule:
    """
    A single publisher lookup rule.

    Attributes:
        patterns: Lowercase substrings, any of which selects this rule
        name: Publisher name returned on a match
        on_copyright: Match against the copyright line instead of the
            company code
    """
    patterns: tuple[str, ...]
    name: str
    on_copyright: bool = False

    def matches(self, company: str, copyright_line: str) -> bool:
        text = copyright_line if self.on_copyright else company
        return any(pattern in text for pattern in self.patterns)


def _rule(*patterns: str, name: str, on_copyright: bool = False) -> PublisherRule:
    return PublisherRule(patterns=patterns, name=name, on_copyright=on_copyright)


PUBLISHER_RULES: Final = (
    # Named codes
    _rule("sega", name="Sega"),
    _rule("acld", name="Ballistic"),
    _rule("asci", name="Asciiware"),
    _rule("inf", name="Infogrames"),
    _rule("rsi", name="Razorsoft"),
    _rule("trec", name="Treco"),
    _rule("vrgn", name="Virgin Games"),
    _rule("wstn", name="Westone"),
    _rule("t-snk 95-feb", name="Hi-Tech Entertainment", on_copyright=True),

    # Three-digit codes, ahead of their two-digit prefixes
    _rule("100", name="THQ Software"),
    _rule("101", name="TecMagik"),
    _rule("112", name="Designer Software"),
    _rule("113", name="Psygnosis"),
    _rule("119", name="Accolade"),
    _rule("120", name="Codemasters"),
    _rule("125", name="Interplay"),
    _rule("130", name="Activision"),
    _rule("132", name="Shiny or Playmates"),
    _rule("144", name="Atlus"),
    _rule("151", name="Infogrames"),
    _rule("161", name="Fox Interactive"),
    _rule("239", name="Disney Interactive"),

    # Two-digit codes
    _rule("10", name="Takara"),
    _rule("11", name="Taito or Accolade"),
    _rule("12", name="Capcom"),
    _rule("13", name="Data East"),
    _rule("14", name="Namco or Tengen"),
    _rule("15", name="Sunsoft"),
    _rule("16", name="Bandai"),
    _rule("17", name="Dempa"),
    _rule("18", "19", name="Technosoft"),
    _rule("20", name="Asmik"),
    _rule("22", name="Micronet"),
    _rule("23", name="Vic Tokai"),
    _rule("24", name="American Sammy"),
    _rule("29", name="Kyugo"),
    _rule("32", name="Wolf Team"),
    _rule("33", name="Kaneko"),
    _rule("35", name="Toaplan"),
    _rule("36", name="Tecmo"),
    _rule("40", name="Toaplan"),
    _rule("42", name="UFL Company Limited"),
    _rule("43", name="Human"),
    _rule("45", name="Game Arts"),
    _rule("47", name="Sage's Creation"),
    _rule("48", name="Tengen"),
    _rule("49", name="Renovation or Telenet"),
    _rule("50", name="Electronic Arts"),
    _rule("56", name="Razorsoft"),
    _rule("58", name="Mentrix"),
    _rule("60", name="Victor Musical Industries"),
    _rule("69", name="Arena"),
    _rule("70", name="Virgin Games"),
    _rule("73", name="Soft Vision"),
    _rule("74", name="Palsoft"),
    _rule("76", name="Koei"),
    _rule("79", name="U.S. Gold"),
    _rule("81", name="Acclaim or Flying Edge"),
    _rule("83", name="Gametek"),
    _rule("86", name="Absolute"),
    _rule("93", name="Sony"),
    _rule("95", name="Konami"),
    _rule("97", name="Tradewest"),
)


def _normalize(value: Union[bytes, str]) -> str:
    """Lowercase (ASCII only) and cut at the first NUL byte."""
    if isinstance(value, str):
        value = value.encode("latin-1", errors="replace")
    value = value.split(b"\0", 1)[0]
    # bytes.lower() only touches A-Z
    return value.lower().decode("latin-1")


def resolve_publisher(
    company: Union[bytes, str],
    copyright: Union[bytes, str] = b"",
) -> str:
    """
    Resolve a publisher name from the header company field.

    Args:
        company: The 8-byte company field (bytes or latin-1 str)
        copyright: The 8-byte copyright field that follows it

    Returns:
        The publisher name, or "Unknown" if no rule matches

    Example:
        >>> resolve_publisher(b"(C)T-50 ")
        'Electronic Arts'
        >>> resolve_publisher(b"(C)T-120")
        'Codemasters'
    """
    company_text = _normalize(company)
    # The copyright line spans both fields: "(C)T-SNK 95-FEB"
    copyright_line = _normalize(company) + _normalize(copyright)

    for rule in PUBLISHER_RULES:
        if rule.matches(company_text, copyright_line):
            return rule.name
    return UNKNOWN_PUBLISHER
