"""
Value Converters - Dimension, Thread and Screw-Size Normalization
==================================================================
Pure string -> string functions.

RULE: Total functions. Unparseable input degrades to passthrough
      (quote marks removed), never an exception.
"""

import re
from decimal import Decimal, localcontext
from fractions import Fraction
from typing import Optional, Sequence, Tuple

from utils_text import normalize_whitespace

# Inch marks as they show up in vendor text
_INCH_MARKS = ('"', '”', '″', "''")

# "1/4", "1-1/2", "1 1/2"
_FRACTION_RE = re.compile(r'^(?:(\d+)[\s-]+)?(\d+)\s*/\s*(\d+)$')

# "2", "0.250", ".5"
_DECIMAL_RE = re.compile(r'^(?:\d+(?:\.\d*)?|\.\d+)$')

# size, separator, pitch, optional class: "8-32", "1/4-20 UNC", "M3 x 0.50mm", "1-1/4-7"
_THREAD_RE = re.compile(
    r'^(?P<size>.+?)\s*(?:[-xX×]|\s)\s*(?P<pitch>\d+(?:\.\d+)?)\s*(?:mm)?(?:[\s-]*[A-Z]{2,4}(?:-?\d[AB])?)?$',
    re.IGNORECASE,
)

_SCREW_NUMBER_RE = re.compile(r'^(?:no\.?|#)\s*', re.IGNORECASE)
_METRIC_SIZE_RE = re.compile(r'^M\d+(?:\.\d+)?$', re.IGNORECASE)
_TRAILING_MM_RE = re.compile(r'\s*mm\.?$', re.IGNORECASE)


# ==============================================================================
# BASIC CLEANUP
# ==============================================================================

def strip_quotes(value: str) -> str:
    """Removes inch marks anywhere in the text."""
    text = value or ""
    for mark in _INCH_MARKS:
        text = text.replace(mark, "")
    return normalize_whitespace(text)


def strip_units(value: str) -> str:
    """
    Removes a trailing inch mark or "mm".

    '1/2"' -> "1/2", "25 mm" -> "25"
    """
    text = strip_quotes(value)
    return _TRAILING_MM_RE.sub("", text).strip()


# ==============================================================================
# FRACTIONS
# ==============================================================================

def format_decimal(amount: Fraction) -> str:
    """
    Shortest exact decimal rendering of a rational value.

    5/8 -> "0.625" (never rounded to "0.63"), 3/2 -> "1.5", 2 -> "2".
    Non-terminating values (1/3) are rounded to 4 places.
    """
    if amount.denominator == 1:
        return str(amount.numerator)

    with localcontext() as ctx:
        ctx.prec = 40
        value = Decimal(amount.numerator) / Decimal(amount.denominator)
        if Fraction(value) != amount:
            value = value.quantize(Decimal("0.0001"))
        text = format(value.normalize(), "f")
    return text


def parse_fraction(value: str) -> Optional[Fraction]:
    """Rational value of "a/b", "w-a/b" or decimal text, None if it is not a number."""
    text = strip_quotes(value)
    if _DECIMAL_RE.match(text):
        return Fraction(Decimal(text))
    match = _FRACTION_RE.match(text)
    if not match:
        return None
    whole, numerator, denominator = match.groups()
    if int(denominator) == 0:
        return None
    return Fraction(int(numerator), int(denominator)) + int(whole or 0)


def fraction_to_decimal(value: str) -> str:
    """
    '1/4"' -> "0.25", '1-1/2"' -> "1.5", '5/16"' -> "0.3125", '0.250"' -> "0.25".

    Anything that is not a number passes through without its quote marks.
    """
    amount = parse_fraction(value)
    if amount is None:
        return strip_quotes(value)
    return format_decimal(amount)


def dimension(value: str) -> str:
    """Default dimension conversion: units stripped, fractions as decimals."""
    return fraction_to_decimal(strip_units(value))


# ==============================================================================
# THREADS
# ==============================================================================

def normalize_thread_size(value: str) -> str:
    """
    Standardizes the size/pitch separator to 'x'.

    Examples:
        "8-32"          -> "8x32"
        '1/4"-20'       -> "1/4x20"     (thread fractions are kept)
        "M3 x 0.50mm"   -> "M3x0.50"    (pitch precision kept)
        "No. 10-24"     -> "10x24"
        "M8"            -> "M8"
    """
    text = _SCREW_NUMBER_RE.sub("", strip_quotes(value))
    match = _THREAD_RE.match(text)
    if not match:
        return _TRAILING_MM_RE.sub("", text).replace(" ", "")
    size = match.group("size").replace(" ", "")
    return f"{size}x{match.group('pitch')}"


def complete_metric_pitch(thread: str, detail_description: str = "", pitch_value: str = "") -> str:
    """
    Adds the pitch to a bare metric size ("M8" -> "M8x1.25").

    The pitch is taken from the detail description ("M8 x 1.25 mm ...")
    or, failing that, from a separate thread pitch value.
    """
    if not _METRIC_SIZE_RE.match(thread or ""):
        return thread

    if detail_description:
        pattern = re.escape(thread) + r'\s*[xX×]\s*(\d+(?:\.\d+)?)\s*mm'
        match = re.search(pattern, detail_description, re.IGNORECASE)
        if match:
            return f"{thread}x{match.group(1)}"

    pitch = strip_units(pitch_value or "")
    if re.fullmatch(r'\d+(?:\.\d+)?', pitch):
        return f"{thread}x{pitch}"
    return thread


# ==============================================================================
# SCREW SIZES
# ==============================================================================

def screw_size_number(value: str) -> str:
    """
    Keeps screw-size notation, minus the "No." / "#" prefix.

    "No. 6" -> "6", '1/4"' -> "1/4"
    """
    return _SCREW_NUMBER_RE.sub("", strip_quotes(value)).strip()


# ==============================================================================
# MATERIALS
# ==============================================================================

def split_material_finish(material: str, finish_keywords: Sequence[str]) -> Tuple[str, Optional[str]]:
    """
    Splits an embedded finish off a material description.

    finish_keywords must be ordered longest first so that
    "Zinc Yellow-Chromate Plated" wins over "Zinc Plated".

    "Zinc-Plated Alloy Steel" -> ("Alloy Steel", "Zinc-Plated")
    """
    text = normalize_whitespace(material)
    for keyword in finish_keywords:
        pattern = r'(?<![\w-])' + re.escape(keyword) + r'(?![\w-])'
        match = re.search(pattern, text, re.IGNORECASE)
        if match:
            remainder = normalize_whitespace(text[:match.start()] + " " + text[match.end():])
            remainder = remainder.strip(" ,-")
            if remainder:
                return remainder, match.group(0)
    return text, None


_GRADE_RULES = (
    (re.compile(r'\bgrade\s*1\b', re.IGNORECASE), "Grade 1 Steel"),
    (re.compile(r'\bgrade\s*2\b', re.IGNORECASE), "Grade 2 Steel"),
    (re.compile(r'\bgrade\s*5\b', re.IGNORECASE), "Grade 5 Steel"),
    (re.compile(r'\bgrade\s*8\b', re.IGNORECASE), "Grade 8 Steel"),
    (re.compile(r'(?<![\d.])8\.8(?![\d.])'), "8.8 Steel"),
    (re.compile(r'(?<![\d.])10\.9(?![\d.])'), "10.9 Steel"),
    (re.compile(r'(?<![\d.])12\.9(?![\d.])'), "12.9 Steel"),
)


def refine_steel_grade(material: str, grade: str) -> str:
    """
    "Steel" / "Alloy Steel" + "Grade 8" -> "Grade 8 Steel".

    Other materials, or an unrecognized grade, pass through.
    """
    if not grade or material.casefold() not in ("steel", "alloy steel"):
        return material
    for pattern, refined in _GRADE_RULES:
        if pattern.search(grade):
            return refined
    return material


_NO_FILLER = ("", "none", "not specified", "n/a")


def apply_filler(material: str, filler: str) -> str:
    """Bearing filler prefix: ("Nylon Plastic", "MDS") -> "MDS-Filled Nylon Plastic"."""
    filler = normalize_whitespace(filler)
    if filler.casefold() in _NO_FILLER:
        return material
    return f"{filler}-Filled {material}"
