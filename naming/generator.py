"""
Name Generator
==============
Detector -> Template -> per field: resolve, interpret, abbreviate -> join.

CRITICAL RULES:
- Total: every record yields a non-empty name, nothing raises
- Deterministic: same input, same name (no hidden state)
- No empty segments: unresolved fields and empty tokens are dropped
- Unmatched records get the fallback name:
  family keywords + part number ("Ball-Bearing-Pillow-Widget-12345A678")
"""

import logging
import re
from dataclasses import dataclass, field
from typing import FrozenSet, List, Optional, Tuple

from models.generated_name import DetectionResult, GeneratedName, NameToken
from models.naming_types import FinishPolicy, LogicalField, Strategy
from models.part_spec import CategoryHint, SpecificationRecord
from naming.abbreviations import SUPPRESSED_FINISH_TOKENS
from naming.detector import detect
from naming.resolver import FieldValue, resolve_field
from naming.templates import FieldSpec, NamingTemplate, get_template
from utils_text import STOPWORDS, significant_keywords

logger = logging.getLogger(__name__)

SEPARATOR = "-"
UNKNOWN = "UNKNOWN"


@dataclass(frozen=True)
class NamingOptions:
    """Caller-tunable knobs (see config.NamingConf)."""

    fallback_keywords: int = 4
    stopwords: FrozenSet[str] = field(default_factory=lambda: STOPWORDS)


DEFAULT_OPTIONS = NamingOptions()


# ==============================================================================
# TOKENS
# ==============================================================================

def clean_token(token: str) -> str:
    """Drops whitespace and edge separators; "a--b" becomes "a-b"."""
    token = re.sub(r'\s+', '', token or "")
    return re.sub(r'-{2,}', SEPARATOR, token).strip(SEPARATOR)


@dataclass(frozen=True)
class FieldOutcome:
    """
    What happened to one template field.

    value is None when the field did not resolve; token is None when
    nothing was emitted (unresolved, empty or suppressed).
    """

    spec: FieldSpec
    value: Optional[FieldValue]
    token: Optional[NameToken]
    abbreviation: Optional[str] = None     # "exact", "pattern" or "passthrough"

    @property
    def resolved(self) -> bool:
        return self.value is not None or (self.token is not None and self.token.origin == "extracted")


def _emit(spec: FieldSpec, value: str, origin: str, source: str, raw: str) -> Tuple[Optional[NameToken], str]:
    token, how = spec.table.lookup(value)
    token = clean_token(token)
    if spec.strategy is Strategy.FINISH and token in SUPPRESSED_FINISH_TOKENS:
        return None, how
    if not token:
        return None, how
    return NameToken(token=token, origin=origin, field=spec.field, source=source, raw_value=raw), how


def apply_template(template: NamingTemplate, record: SpecificationRecord) -> List[FieldOutcome]:
    """
    Runs every template field through resolve -> interpret -> abbreviate.

    Shared by generate() and the analyzer so both see the same decisions.
    """
    values = [resolve_field(record, spec, template.context) for spec in template.fields]

    # Finish found inside the material text, used when no Finish field resolves
    extracted: Optional[FieldValue] = None
    for spec, value in zip(template.fields, values):
        if value is not None and spec.strategy is Strategy.MATERIAL and value.finish:
            extracted = value
            break

    outcomes = []
    for spec, value in zip(template.fields, values):
        if value is not None:
            token, how = _emit(spec, value.value, value.origin, value.source, value.raw)
            outcomes.append(FieldOutcome(spec, value, token, how))
        elif (spec.field is LogicalField.FINISH
              and template.finish_policy is FinishPolicy.EXTRACT_FROM_MATERIAL
              and extracted is not None):
            token, how = _emit(spec, extracted.finish, "extracted", extracted.source, extracted.raw)
            outcomes.append(FieldOutcome(spec, None, token, how))
        else:
            outcomes.append(FieldOutcome(spec, None, None))
    return outcomes


# ==============================================================================
# FALLBACK
# ==============================================================================

def fallback_tokens(hint: CategoryHint, record: SpecificationRecord,
                    options: NamingOptions = DEFAULT_OPTIONS) -> Tuple[NameToken, ...]:
    """
    Family keywords (original case) + part number.

    No usable keyword -> "UNKNOWN"; no part number -> segment omitted.
    """
    tokens = []
    for word in significant_keywords(hint.family, options.fallback_keywords, options.stopwords):
        word = clean_token(word)
        if word:
            tokens.append(NameToken(token=word, origin="keyword", raw_value=hint.family))
    if not tokens:
        tokens.append(NameToken(token=UNKNOWN, origin="keyword", raw_value=hint.family))

    part_number = clean_token(record.part_number)
    if part_number:
        tokens.append(NameToken(token=part_number, origin="part_number", raw_value=record.part_number))
    return tuple(tokens)


# ==============================================================================
# GENERATE
# ==============================================================================

def _join(tokens) -> str:
    return SEPARATOR.join(t.token for t in tokens if t.token)


def generate(hint: CategoryHint, record: Optional[SpecificationRecord] = None,
             options: Optional[NamingOptions] = None) -> GeneratedName:
    """
    Generates the name and its token trace.

    Example:
        generate(CategoryHint("Nuts", "18-8 SS Nylon-Insert Locknut"),
                 SpecificationRecord({"Material": "18-8 Stainless Steel", "Thread Size": "4-40"}))
        -> GeneratedName(name="LN-SS188-4x40", ...)
    """
    record = record if record is not None else SpecificationRecord()
    options = options or DEFAULT_OPTIONS

    detection = detect(hint, record)
    template = get_template(detection.tag)
    if template is None:
        if detection.matched:
            logger.warning(f"No naming template registered for '{detection.tag}', using fallback")
        return _fallback(hint, record, detection, options)

    tokens = [NameToken(token=template.prefix, origin="prefix")]
    tokens += [o.token for o in apply_template(template, record) if o.token is not None]
    return GeneratedName(name=_join(tokens), detection=detection, tokens=tuple(tokens))


def _fallback(hint: CategoryHint, record: SpecificationRecord, detection: DetectionResult,
              options: NamingOptions) -> GeneratedName:
    tokens = fallback_tokens(hint, record, options)
    name = _join(tokens)
    logger.debug(f"Fallback name '{name}' for family '{hint.family}'")
    return GeneratedName(name=name, detection=detection, tokens=tokens, is_fallback=True)


def generate_name(hint: CategoryHint, record: Optional[SpecificationRecord] = None,
                  options: Optional[NamingOptions] = None) -> str:
    return generate(hint, record, options).name
