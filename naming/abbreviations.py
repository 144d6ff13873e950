"""
Abbreviation Tables - Long-Form Vendor Text to Short Tokens
============================================================
Static, read-only tables. Lookup order per table:

1. Exact match (case-insensitive)
2. Pattern rules, first full match wins
3. Default passthrough: original text without quote marks and whitespace

RULE: Tables are built once at import and never mutated.
"""

import re
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional, Pattern, Sequence, Tuple

from naming.converters import strip_quotes


@dataclass(frozen=True)
class AbbreviationTable:
    """Exact entries plus ordered (regex, replacement) pattern rules."""

    name: str
    exact: Mapping[str, str] = field(default_factory=dict)
    patterns: Tuple[Tuple[Pattern, str], ...] = ()
    _folded: Mapping[str, str] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "exact", MappingProxyType(dict(self.exact)))
        folded = {key.casefold(): value for key, value in self.exact.items()}
        object.__setattr__(self, "_folded", MappingProxyType(folded))

    def lookup(self, value: str) -> Tuple[str, str]:
        """
        Returns:
            (token, how) where how is "exact", "pattern" or "passthrough"
        """
        text = " ".join((value or "").split())
        hit = self._folded.get(text.casefold())
        if hit is not None:
            return hit, "exact"
        for pattern, replacement in self.patterns:
            match = pattern.fullmatch(text)
            if match:
                return match.expand(replacement), "pattern"
        return passthrough(text), "passthrough"

    def abbreviate(self, value: str) -> str:
        return self.lookup(value)[0]

    def extend(self, name: str, exact: Optional[Mapping[str, str]] = None,
               patterns: Sequence[Tuple[str, str]] = ()) -> 'AbbreviationTable':
        """New table with extra entries; extra patterns are tried first."""
        merged = dict(self.exact)
        merged.update(exact or {})
        return AbbreviationTable(name, merged, _compile(patterns) + self.patterns)


def passthrough(value: str) -> str:
    """Default rule: keep the vendor text, minus quote marks and whitespace."""
    return re.sub(r'\s+', '', strip_quotes(value))


def _compile(patterns: Sequence[Tuple[str, str]]) -> Tuple[Tuple[Pattern, str], ...]:
    return tuple((re.compile(regex, re.IGNORECASE), replacement) for regex, replacement in patterns)


# ==============================================================================
# MATERIALS
# ==============================================================================

MATERIALS = AbbreviationTable(
    "materials",
    {
        "316 Stainless Steel": "SS316",
        "18-8 Stainless Steel": "SS188",
        "304 Stainless Steel": "SS304",
        "303 Stainless Steel": "SS303",
        "410 Stainless Steel": "SS410",
        "Stainless Steel": "SS",
        "Steel": "S",
        "Alloy Steel": "S",
        "Carbon Steel": "S",
        "Low-Strength Steel": "S",
        "Medium-Strength Steel": "S",
        "High-Strength Steel": "S",
        "Spring Steel": "SPS",
        "1215 Carbon Steel": "1215S",
        # Steel grades (after refinement with the strength grade field)
        "Grade 1 Steel": "SG1",
        "Grade 2 Steel": "SG2",
        "Grade 5 Steel": "SG5",
        "Grade 8 Steel": "SG8",
        "8.8 Steel": "S8.8",
        "10.9 Steel": "S10.9",
        "12.9 Steel": "S12.9",
        # Non-ferrous
        "Aluminum": "AL",
        "Brass": "BRASS",
        "Bronze": "BR",
        "Copper": "CU",
        "Titanium": "TI",
        "Cast Iron": "CI",
        "Zinc": "ZN",
        # Plastics
        "Acetal": "ACET",
        "Acetal Plastic": "ACET",
        "Nylon": "NYL",
        "Nylon Plastic": "NYL",
        "Plastic": "PL",
        "PEEK": "PEEK",
        "PEEK Plastic": "PEEK",
        "PTFE": "PTFE",
        "PTFE Plastic": "PTFE",
        "PVC": "PVC",
        "PVC Plastic": "PVC",
        "Polycarbonate": "PC",
        "Polyethylene": "PE",
        "Polypropylene": "PP",
        "Rubber": "RUB",
        "Fiber": "FIB",
    },
    _compile((
        (r'(\d{3}) Stainless Steel', r'SS\1'),
        (r'Grade (\d+) (?:Alloy )?Steel', r'SG\1'),
        (r'(\d+\.\d) (?:Alloy )?Steel', r'S\1'),
    )),
)

BEARING_MATERIALS = MATERIALS.extend(
    "bearing_materials",
    {
        "MDS-Filled Nylon Plastic": "MDSNYL",
        "MDS-Filled Nylon": "MDSNYL",
        "Bronze SAE 841": "BR841",
        "Bronze SAE 863": "BR863",
        "Cast Bronze": "CB",
        "Oil-Filled Bronze": "OFB",
        "Oil-Embedded Bronze": "OFB",
        "Rulon": "RUL",
        "Graphite": "GRAPH",
        "Steel-Backed PTFE": "SBPTFE",
    },
    patterns=(
        (r'Bronze SAE (\d+)', r'BR\1'),
    ),
)

# Latches and cable holders spell plain steel out
LATCH_MATERIALS = MATERIALS.extend(
    "latch_materials",
    {"Steel": "STEEL"},
)

CABLE_HOLDER_MATERIALS = MATERIALS.extend(
    "cable_holder_materials",
    {"Steel": "STEEL", "Nylon Plastic": "NY"},
)


# ==============================================================================
# FINISHES
# ==============================================================================

FINISHES = AbbreviationTable(
    "finishes",
    {
        "Zinc Plated": "ZP",
        "Zinc-Plated": "ZP",
        "Zinc Yellow-Chromate Plated": "ZYC",
        "Zinc Yellow Chromate Plated": "ZYC",
        "Black Oxide": "BO",
        "Black-Oxide": "BO",
        "Cadmium Plated": "CD",
        "Cadmium-Plated": "CD",
        "Nickel Plated": "NI",
        "Nickel-Plated": "NI",
        "Chrome Plated": "CR",
        "Chrome-Plated": "CR",
        "Galvanized": "GAL",
        "Hot-Dip Galvanized": "HDG",
        "Hot-Dipped Galvanized": "HDG",
        "Black Anodized": "BA",
        "Black-Anodized": "BA",
        "Clear Anodized": "CA",
        "Passivated": "PASS",
        "Plain": "",
        "Unfinished": "",
        "None": "",
    },
    _compile((
        (r'Hot[- ]Dip(?:ped)? Galvanized.*', 'HDG'),
        (r'(\w+)[- ]Anodized', r'\1A'),
    )),
)

# Finish tokens that add no information to a name
SUPPRESSED_FINISH_TOKENS = frozenset({"PASS"})

# Finish phrases recognized inside material text, longest first
FINISH_KEYWORDS: Tuple[str, ...] = tuple(sorted(
    (
        "Zinc Yellow-Chromate Plated", "Zinc Yellow Chromate Plated",
        "Black-Oxide", "Black Oxide",
        "Zinc-Plated", "Zinc Plated",
        "Cadmium-Plated", "Cadmium Plated",
        "Nickel-Plated", "Nickel Plated",
        "Chrome-Plated", "Chrome Plated",
        "Hot-Dipped Galvanized", "Hot-Dip Galvanized", "Galvanized",
        "Black-Anodized", "Black Anodized", "Clear Anodized",
        "Passivated", "Plain", "Unfinished",
    ),
    key=len,
    reverse=True,
))


# ==============================================================================
# DRIVES, SCREW SIZES, MOUNTS
# ==============================================================================

DRIVE_STYLES = AbbreviationTable(
    "drive_styles",
    {
        "Hex": "HEX",
        "Phillips": "PH",
        "Slotted": "SL",
        "Torx": "TX",
        "Torx Plus": "TXP",
        "6-Lobe": "6L",
        "Pozidriv": "PZ",
        "Pozidriv®": "PZ",
        "Square": "SQ",
        "Triangle": "TRI",
        "Spline": "SP",
        "Splined": "SPL",
        "Clutch": "CLU",
        "One-Way": "1WAY",
        "12-Point": "12PT",
        "Double Hex": "DHEX",
        "External Hex": "EHEX",
        "Pin Hex": "PINHEX",
        "Pin-in-Hex": "PINHEX",
        "Pin-in-Torx": "PINTX",
        "Tamper-Resistant Hex": "TRHEX",
        "Tamper-Resistant Torx": "TRTX",
        "Phillips/Slotted": "PHSL",
        "Combination Phillips/Slotted": "PHSL",
    },
    _compile((
        (r'Tamper[- ]Resistant (\w+)', r'TR\1'),
    )),
)

SCREW_SIZES = AbbreviationTable(
    "screw_sizes",
    {},
    _compile((
        (r'(?:No\.?|#)\s*(\d+)', r'\1'),
    )),
)

MOUNT_TYPES = AbbreviationTable(
    "mount_types",
    {
        "Screw On": "SO",
        "Screw-On": "SO",
        "Weld On": "WO",
        "Weld-On": "WO",
        "Bolt On": "BO",
        "Bolt-On": "BO",
        "Surface Mount": "SM",
        "Surface": "SM",
        "Screw In": "SI",
        "Screw-In": "SI",
        "Adhesive": "ADH",
        "Self-Adhesive": "ADH",
        "Adhesive Back": "ADH",
        "Snap In": "SNP",
        "Snap-In": "SNP",
        "Push Mount": "PUSH",
        "Push-In": "PUSH",
        "Tie Mount": "TIE",
        "Rivet On": "RO",
        "Rivet-On": "RO",
    },
)

LATCH_TYPES = AbbreviationTable(
    "latch_types",
    {
        "Locking": "L",
        "Nonlocking": "NL",
        "Non-Locking": "NL",
        "Keyed": "K",
        "Adjustable": "ADJ",
        "Fixed": "F",
    },
)

BEARING_TYPES = AbbreviationTable(
    "bearing_types",
    {
        "Ball": "BALL",
        "Ball Bearing": "BALL",
        "Plain": "PLAIN",
        "Plain Bearing": "PLAIN",
        "Roller": "ROLLER",
        "Roller Bearing": "ROLLER",
        "Needle": "NEEDLE",
        "Needle-Roller": "NEEDLE",
        "Sleeve": "SLEEVE",
        "Flanged": "FLG",
        "Linear": "LIN",
        "Thrust": "THR",
        "None": "NONE",
    },
)

# Dimensions and thread sizes are already canonical after conversion
PASSTHROUGH = AbbreviationTable("passthrough")
