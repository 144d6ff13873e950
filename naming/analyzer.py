"""
Name Analyzer - Diagnostic Companion to the Generator
======================================================
Runs the generator pipeline and keeps every decision:
- detected tag and the rule that fired
- every vendor spec: used, shadowed alias, auxiliary or unmapped
- every template field: present or missing, raw value, token
- suggestions (finish found in the text, missing fields, unmapped specs)

RULE: Read-only. analyze() never changes what generate() returns.
"""

import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from models.generated_name import GeneratedName
from models.naming_types import LogicalField
from models.part_spec import CategoryHint, SpecificationRecord
from naming.abbreviations import FINISHES, FINISH_KEYWORDS, SUPPRESSED_FINISH_TOKENS
from naming.converters import split_material_finish
from naming.generator import SEPARATOR, NamingOptions, apply_template, clean_token, generate
from naming.resolver import AUXILIARY_FIELDS
from naming.templates import NamingTemplate, get_template
from utils_text import fold


@dataclass
class SpecUsage:
    """One vendor specification and what the engine did with it."""

    name: str
    value: str
    status: str                          # "used", "shadowed", "auxiliary", "unmapped"
    field: Optional[str] = None          # LogicalField label
    token: Optional[str] = None

    @property
    def used(self) -> bool:
        return self.status == "used"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "value": self.value,
            "status": self.status,
            "used": self.used,
            "field": self.field,
            "token": self.token,
        }


@dataclass
class ExpectedField:
    """One template field, present or missing."""

    field: str
    aliases: List[str]
    required: bool
    present: bool
    source: Optional[str] = None
    raw_value: Optional[str] = None
    value: Optional[str] = None          # after interpretation
    token: Optional[str] = None
    origin: Optional[str] = None         # "direct", "alias", "extracted"
    abbreviation: Optional[str] = None   # "exact", "pattern", "passthrough"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "field": self.field,
            "aliases": list(self.aliases),
            "required": self.required,
            "present": self.present,
            "source": self.source,
            "raw_value": self.raw_value,
            "value": self.value,
            "token": self.token,
            "origin": self.origin,
            "abbreviation": self.abbreviation,
        }


@dataclass
class AnalysisReport:
    part_number: str
    category: str
    family: str
    generated: GeneratedName
    detail_description: str = ""
    template_prefix: Optional[str] = None
    expected: List[ExpectedField] = field(default_factory=list)
    specs: List[SpecUsage] = field(default_factory=list)
    suggestions: List[str] = field(default_factory=list)
    suggested_name: Optional[str] = None
    inferred_finish: Optional[str] = None

    @property
    def name(self) -> str:
        return self.generated.name

    @property
    def detected_tag(self) -> Optional[str]:
        return self.generated.detection.tag

    @property
    def rule(self) -> Optional[str]:
        return self.generated.detection.rule

    @property
    def used_specs(self) -> List[SpecUsage]:
        return [s for s in self.specs if s.used]

    @property
    def unused_specs(self) -> List[SpecUsage]:
        return [s for s in self.specs if not s.used]

    @property
    def unmapped(self) -> List[str]:
        return [s.name for s in self.specs if s.status == "unmapped"]

    @property
    def missing(self) -> List[str]:
        return [e.field for e in self.expected if not e.present]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "part_number": self.part_number,
            "category": self.category,
            "family": self.family,
            "detail_description": self.detail_description,
            "detected_tag": self.detected_tag,
            "rule": self.rule,
            "is_fallback": self.generated.is_fallback,
            "template_prefix": self.template_prefix,
            "name": self.name,
            "suggested_name": self.suggested_name,
            "inferred_finish": self.inferred_finish,
            "tokens": [t.to_dict() for t in self.generated.tokens],
            "expected_fields": [e.to_dict() for e in self.expected],
            "missing_fields": self.missing,
            "specifications": [s.to_dict() for s in self.specs],
            "unmapped_specs": self.unmapped,
            "suggestions": list(self.suggestions),
        }


# ==============================================================================
# ANALYZE
# ==============================================================================

def _infer_finish(texts: List[str]) -> Optional[Tuple[str, str]]:
    """First finish keyword found in the given texts, as (phrase, token)."""
    for text in texts:
        if not text:
            continue
        _, phrase = split_material_finish(text, FINISH_KEYWORDS)
        if not phrase:
            continue
        token = clean_token(FINISHES.abbreviate(phrase))
        if token and token not in SUPPRESSED_FINISH_TOKENS:
            return phrase, token
    return None


def _alias_index(template: Optional[NamingTemplate]) -> Dict[str, LogicalField]:
    index: Dict[str, LogicalField] = {}
    if template is None:
        return index
    for spec in template.fields:
        for alias in spec.aliases:
            index.setdefault(fold(alias), spec.field)
    return index


def analyze(hint: CategoryHint, record: Optional[SpecificationRecord] = None,
            options: Optional[NamingOptions] = None) -> AnalysisReport:
    """
    Builds the diagnostic report for one record.
    """
    record = record if record is not None else SpecificationRecord()
    generated = generate(hint, record, options)
    template = None if generated.is_fallback else get_template(generated.detection.tag)

    report = AnalysisReport(
        part_number=record.part_number,
        category=hint.category,
        family=hint.family,
        generated=generated,
        detail_description=record.detail_description,
        template_prefix=template.prefix if template else None,
    )

    used: Dict[str, Tuple[LogicalField, Optional[str]]] = {}
    finish_emitted = False
    if template is not None:
        for outcome in apply_template(template, record):
            spec = outcome.spec
            token = outcome.token.token if outcome.token else None
            entry = ExpectedField(
                field=spec.field.value,
                aliases=list(spec.aliases),
                required=spec.required,
                present=outcome.resolved,
                token=token,
                abbreviation=outcome.abbreviation,
            )
            if outcome.value is not None:
                entry.source = outcome.value.source
                entry.raw_value = outcome.value.raw
                entry.value = outcome.value.value
                entry.origin = outcome.value.origin
                used[fold(outcome.value.source)] = (spec.field, token)
            elif outcome.token is not None:
                entry.source = outcome.token.source
                entry.raw_value = outcome.token.raw_value
                entry.value = outcome.token.token
                entry.origin = outcome.token.origin
            if spec.field is LogicalField.FINISH and entry.present:
                finish_emitted = True
            report.expected.append(entry)

    aliases = _alias_index(template)
    for name, value in record.items():
        key = fold(name)
        if key in used:
            logical, token = used[key]
            report.specs.append(SpecUsage(name, value, "used", logical.value, token))
        elif key in aliases:
            report.specs.append(SpecUsage(name, value, "shadowed", aliases[key].value))
        elif key in AUXILIARY_FIELDS:
            report.specs.append(SpecUsage(name, value, "auxiliary"))
        else:
            report.specs.append(SpecUsage(name, value, "unmapped"))

    _suggest(report, template, record, finish_emitted)
    return report


def _suggest(report: AnalysisReport, template: Optional[NamingTemplate],
             record: SpecificationRecord, finish_emitted: bool):
    if template is None:
        report.suggestions.append(
            f"No template matched category '{report.category}' / family '{report.family}'; "
            f"fallback name used"
        )
    else:
        for entry in report.expected:
            if entry.origin == "extracted":
                report.suggestions.append(
                    f"{entry.field} '{entry.raw_value}' taken from material text -> {entry.token or '(suppressed)'}"
                )
            if entry.required and not entry.present:
                report.suggestions.append(
                    f"Missing required field {entry.field} (looked for: {', '.join(entry.aliases)})"
                )

        if template.expects_finish and not finish_emitted:
            material = template.field_spec(LogicalField.MATERIAL)
            texts = [record.get(a, "") for a in material.aliases] if material else []
            texts += [report.family, record.detail_description]
            inferred = _infer_finish(texts)
            if inferred:
                phrase, token = inferred
                report.inferred_finish = token
                report.suggested_name = f"{report.name}{SEPARATOR}{token}"
                report.suggestions.append(f"Finish missing, '{phrase}' found in product text -> {token}")

    for name in report.unmapped:
        report.suggestions.append(f"Unmapped specification '{name}' = '{record.get(name, '')}'")


# ==============================================================================
# RENDERERS
# ==============================================================================

_STATUS_ICONS = {
    "used": "✅",
    "shadowed": "↪️",
    "auxiliary": "⚙️",
    "unmapped": "❓",
}


def format_json(report: AnalysisReport, indent: int = 2) -> str:
    return json.dumps(report.to_dict(), indent=indent, ensure_ascii=False)


def format_human(report: AnalysisReport, show_template: bool = False, show_aliases: bool = False) -> str:
    """
    Human-readable report.

    show_template adds the template field list, show_aliases adds the
    vendor field names each template field accepts.
    """
    lines = []
    lines.append("=" * 60)
    lines.append(f"🔎 NAME ANALYSIS: {report.part_number or '(no part number)'}")
    lines.append("=" * 60)
    lines.append(f"   Category:  {report.category or '-'}")
    lines.append(f"   Family:    {report.family or '-'}")
    if report.detail_description:
        lines.append(f"   Detail:    {report.detail_description}")

    if report.generated.is_fallback:
        lines.append("   Detected:  ⚠️ no template (fallback naming)")
    else:
        lines.append(f"   Detected:  {report.detected_tag} (prefix {report.template_prefix})")
        lines.append(f"   Rule:      {report.rule}")

    lines.append("")
    lines.append(f"🏷️ Name: {report.name}")
    if report.suggested_name:
        lines.append(f"💡 Suggested: {report.suggested_name}")

    lines.append("")
    lines.append("🧩 Breakdown:")
    for token in report.generated.tokens:
        label = token.field.value if token.field else token.origin
        detail = f" <- {token.source}: '{token.raw_value}'" if token.source else ""
        lines.append(f"   • {token.token:<12} {label} [{token.origin}]{detail}")

    if show_template and report.expected:
        lines.append("")
        lines.append("📐 Template fields:")
        for entry in report.expected:
            icon = "✅" if entry.present else ("❌" if entry.required else "➖")
            flag = "required" if entry.required else "optional"
            line = f"   {icon} {entry.field} ({flag})"
            if entry.present:
                line += f" = '{entry.raw_value}' -> {entry.token or '(dropped)'}"
            lines.append(line)
            if show_aliases:
                lines.append(f"      aliases: {', '.join(entry.aliases)}")

    lines.append("")
    lines.append(f"📋 Specifications ({len(report.specs)}):")
    if not report.specs:
        lines.append("   (none)")
    for spec in report.specs:
        icon = _STATUS_ICONS.get(spec.status, "•")
        line = f"   {icon} {spec.name}: {spec.value} [{spec.status}]"
        if spec.field:
            line += f" -> {spec.field}"
        if spec.token:
            line += f" = {spec.token}"
        lines.append(line)

    if report.missing:
        lines.append("")
        lines.append(f"❌ Missing fields: {', '.join(report.missing)}")

    if report.suggestions:
        lines.append("")
        lines.append("💡 Suggestions:")
        for suggestion in report.suggestions:
            lines.append(f"   • {suggestion}")

    lines.append("=" * 60)
    return "\n".join(lines)
