"""
Naming Template Model
=====================
A template is data: prefix, ordered fields, alias sets, strategies and
abbreviation tables. Generator and analyzer stay category-agnostic.

RULE: Optional fields that do not resolve are omitted, never rendered
      as empty segments. Required fields that do not resolve are
      omitted as well (the name is still produced) but reported by
      the analyzer.
"""

from dataclasses import dataclass
from typing import Tuple

from models.naming_types import FinishPolicy, LogicalField, Strategy
from naming import abbreviations
from naming.abbreviations import AbbreviationTable


@dataclass(frozen=True)
class FieldSpec:
    """One emitted field of a template."""

    field: LogicalField
    aliases: Tuple[str, ...]            # vendor names, highest priority first
    strategy: Strategy
    table: AbbreviationTable
    required: bool = True

    def __post_init__(self):
        if not self.aliases:
            raise ValueError(f"{self.field.value}: alias set must not be empty")
        object.__setattr__(self, "aliases", tuple(self.aliases))


@dataclass(frozen=True)
class NamingTemplate:
    """
    Naming rule for one category tag.

    context groups templates whose fields are interpreted alike
    ("washer", "spacer", "bearing", ...), see resolver.CONTEXT_CONVERTERS.
    """

    tag: str
    prefix: str
    context: str
    fields: Tuple[FieldSpec, ...]
    finish_policy: FinishPolicy = FinishPolicy.NONE

    def __post_init__(self):
        object.__setattr__(self, "fields", tuple(self.fields))

    @property
    def logical_fields(self) -> Tuple[LogicalField, ...]:
        return tuple(spec.field for spec in self.fields)

    def field_spec(self, field: LogicalField):
        for spec in self.fields:
            if spec.field is field:
                return spec
        return None

    @property
    def expects_finish(self) -> bool:
        return self.field_spec(LogicalField.FINISH) is not None


# ==============================================================================
# SHARED ALIAS SETS
# ==============================================================================

MATERIAL_ALIASES = ("Material",)
THREAD_ALIASES = ("Thread Size", "Thread (A) Size", "Thread (B) Size")
LENGTH_ALIASES = ("Length",)
FINISH_ALIASES = ("Finish",)
SCREW_SIZE_ALIASES = ("For Screw Size",)
OD_ALIASES = ("OD", "Outside Diameter")
SHAFT_ALIASES = ("For Shaft Diameter", "Shaft Diameter", "ID")


# ==============================================================================
# FIELD BUILDERS
# ==============================================================================

def material(aliases=MATERIAL_ALIASES, table=abbreviations.MATERIALS,
             field=LogicalField.MATERIAL) -> FieldSpec:
    return FieldSpec(field, aliases, Strategy.MATERIAL, table)


def finish() -> FieldSpec:
    return FieldSpec(LogicalField.FINISH, FINISH_ALIASES, Strategy.FINISH,
                     abbreviations.FINISHES, required=False)


def thread() -> FieldSpec:
    return FieldSpec(LogicalField.THREAD_SIZE, THREAD_ALIASES, Strategy.THREAD, abbreviations.PASSTHROUGH)


def dimension(field: LogicalField, aliases, required: bool = True) -> FieldSpec:
    return FieldSpec(field, aliases, Strategy.DIMENSION, abbreviations.PASSTHROUGH, required)


def screw_size(required: bool = True) -> FieldSpec:
    return FieldSpec(LogicalField.SCREW_SIZE, SCREW_SIZE_ALIASES, Strategy.SCREW_SIZE,
                     abbreviations.SCREW_SIZES, required)


def plain(field: LogicalField, aliases, table: AbbreviationTable, required: bool = True) -> FieldSpec:
    return FieldSpec(field, aliases, Strategy.PLAIN, table, required)
