"""
Specification Resolver - Alias Resolution and Context Interpretation
=====================================================================
Two independent stages:

1. resolve():   picks the raw value of a logical field from the record
                (first alias present with a non-blank value wins)
2. interpret(): turns that raw value into canonical text, using the
                (LogicalField, context) table first, then the default
                converter of the field's strategy

resolve_field() composes both for one template field.
"""

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING, Callable, Mapping, Optional, Sequence, Tuple

from models.naming_types import LogicalField, Strategy
from models.part_spec import SpecificationRecord
from naming.abbreviations import FINISH_KEYWORDS
from naming.converters import (
    apply_filler,
    complete_metric_pitch,
    dimension,
    normalize_thread_size,
    refine_steel_grade,
    screw_size_number,
    split_material_finish,
)
from utils_text import fold, normalize_whitespace

if TYPE_CHECKING:
    from naming.templates.base import FieldSpec

logger = logging.getLogger(__name__)

# raw value + record -> canonical text
Converter = Callable[[str, SpecificationRecord], str]

# Fields read by converters and the detector, never emitted as tokens
GRADE_ALIASES: Tuple[str, ...] = ("Fastener Strength Grade/Class", "Fastener Strength Grade")
FILLER_ALIASES: Tuple[str, ...] = ("Filler Material",)
PITCH_ALIASES: Tuple[str, ...] = ("Thread Pitch", "Pitch")
BEARING_TYPE_ALIASES: Tuple[str, ...] = ("Mounted Bearing Type", "Plain Bearing Type")

AUXILIARY_FIELDS = frozenset(
    fold(name) for name in GRADE_ALIASES + FILLER_ALIASES + PITCH_ALIASES + BEARING_TYPE_ALIASES
)


# ==============================================================================
# STAGE 1: ALIAS RESOLUTION
# ==============================================================================

@dataclass(frozen=True)
class ResolvedValue:
    """Raw value picked from the record."""

    alias: str          # alias as declared in the template
    source: str         # vendor field name as it appears in the record
    raw: str
    priority: int       # position of the alias, 0 = first choice

    @property
    def origin(self) -> str:
        return "direct" if self.priority == 0 else "alias"


def resolve(record: SpecificationRecord, aliases: Sequence[str]) -> Optional[ResolvedValue]:
    """
    First alias present in the record with a non-blank value.

    Later aliases are never consulted once one matches.
    Returns None when nothing resolves; the caller decides what that means.
    """
    for priority, alias in enumerate(aliases):
        found = record.lookup(alias)
        if found is None:
            continue
        source, raw = found
        if raw.strip():
            return ResolvedValue(alias=alias, source=source, raw=raw, priority=priority)
    return None


def first_value(record: SpecificationRecord, aliases: Sequence[str]) -> str:
    resolved = resolve(record, aliases)
    return resolved.raw if resolved else ""


# ==============================================================================
# STAGE 2: INTERPRETATION
# ==============================================================================

def _plain(raw: str, record: SpecificationRecord) -> str:
    return normalize_whitespace(raw)


def _material(raw: str, record: SpecificationRecord) -> str:
    material, _ = split_material_finish(raw, FINISH_KEYWORDS)
    return refine_steel_grade(material, first_value(record, GRADE_ALIASES))


def _bearing_material(raw: str, record: SpecificationRecord) -> str:
    material, _ = split_material_finish(raw, FINISH_KEYWORDS)
    return apply_filler(material, first_value(record, FILLER_ALIASES))


def _thread(raw: str, record: SpecificationRecord) -> str:
    thread = normalize_thread_size(raw)
    return complete_metric_pitch(thread, record.detail_description, first_value(record, PITCH_ALIASES))


def _dimension(raw: str, record: SpecificationRecord) -> str:
    return dimension(raw)


def _screw_number(raw: str, record: SpecificationRecord) -> str:
    return screw_size_number(raw)


def _screw_decimal(raw: str, record: SpecificationRecord) -> str:
    return dimension(screw_size_number(raw))


DEFAULT_CONVERTERS: Mapping[Strategy, Converter] = MappingProxyType({
    Strategy.MATERIAL: _material,
    Strategy.FINISH: _plain,
    Strategy.THREAD: _thread,
    Strategy.DIMENSION: _dimension,
    Strategy.SCREW_SIZE: _screw_number,
    Strategy.PLAIN: _plain,
})

# Same field, different meaning per template context
CONTEXT_CONVERTERS: Mapping[Tuple[LogicalField, str], Converter] = MappingProxyType({
    (LogicalField.SCREW_SIZE, "washer"): _screw_number,         # "No. 6" -> "6", '1/4"' -> "1/4"
    (LogicalField.SCREW_SIZE, "cable_holder"): _screw_number,
    (LogicalField.SCREW_SIZE, "spacer"): _screw_decimal,        # '1/4"' -> "0.25"
    (LogicalField.MATERIAL, "bearing"): _bearing_material,      # filler prefix, no steel grade
})


def converter_for(field: LogicalField, strategy: Strategy, context: str) -> Converter:
    return CONTEXT_CONVERTERS.get((field, context), DEFAULT_CONVERTERS[strategy])


def interpret(field: LogicalField, strategy: Strategy, raw: str, context: str,
              record: Optional[SpecificationRecord] = None) -> str:
    """
    Canonical text for a raw value under a template context.

    Example:
        interpret(SCREW_SIZE, SCREW_SIZE, "No. 6", "washer")  -> "6"
        interpret(SCREW_SIZE, SCREW_SIZE, '1/4"', "spacer")   -> "0.25"
    """
    if record is None:
        record = SpecificationRecord()
    return converter_for(field, strategy, context)(raw, record)


# ==============================================================================
# COMPOSED
# ==============================================================================

@dataclass(frozen=True)
class FieldValue:
    """One template field after both stages."""

    field: LogicalField
    source: str
    raw: str
    value: str
    origin: str                      # "direct" or "alias"
    finish: Optional[str] = None     # finish phrase found in a material value


def resolve_field(record: SpecificationRecord, spec: 'FieldSpec', context: str) -> Optional[FieldValue]:
    """
    Resolves and interprets one FieldSpec.

    Returns:
        FieldValue, or None when no alias of the field resolves
    """
    resolved = resolve(record, spec.aliases)
    if resolved is None:
        return None

    value = interpret(spec.field, spec.strategy, resolved.raw, context, record)
    finish = None
    if spec.strategy is Strategy.MATERIAL:
        _, finish = split_material_finish(resolved.raw, FINISH_KEYWORDS)

    logger.debug(f"{spec.field.value}: '{resolved.source}' = '{resolved.raw}' -> '{value}'")
    return FieldValue(
        field=spec.field,
        source=resolved.source,
        raw=resolved.raw,
        value=value,
        origin=resolved.origin,
        finish=finish,
    )
