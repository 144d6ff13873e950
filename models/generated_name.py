"""
Generated Name - Engine Output
===============================
The name string plus the trace of how every segment was produced.

RULE: The trace is diagnostic (consumed by the analyzer), the name is
      what end users see.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from models.naming_types import LogicalField


@dataclass(frozen=True)
class DetectionResult:
    """
    Outcome of type detection: the template tag and the rule that fired.

    No partial state: either a tag was matched or the result is UNMATCHED.
    """

    tag: Optional[str] = None
    rule: Optional[str] = None

    @property
    def matched(self) -> bool:
        return self.tag is not None

    def to_dict(self) -> Dict[str, Any]:
        return {"tag": self.tag, "rule": self.rule, "matched": self.matched}


UNMATCHED = DetectionResult()


@dataclass(frozen=True)
class NameToken:
    """
    One segment of a generated name.

    origin is one of:
        "prefix"    - template prefix
        "direct"    - first alias of the field matched
        "alias"     - a later alias matched
        "extracted" - finish split off the material text
        "keyword"   - fallback keyword from the family text
        "part_number" - fallback part-number suffix
    """

    token: str
    origin: str
    field: Optional[LogicalField] = None
    source: Optional[str] = None             # vendor field name
    raw_value: Optional[str] = None          # vendor text before conversion

    def to_dict(self) -> Dict[str, Any]:
        return {
            "token": self.token,
            "origin": self.origin,
            "field": self.field.value if self.field else None,
            "source": self.source,
            "raw_value": self.raw_value,
        }


@dataclass(frozen=True)
class GeneratedName:
    """Final name and its segment trace."""

    name: str
    detection: DetectionResult
    tokens: Tuple[NameToken, ...]
    is_fallback: bool = False

    def __str__(self) -> str:
        return self.name

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "detection": self.detection.to_dict(),
            "is_fallback": self.is_fallback,
            "tokens": [t.to_dict() for t in self.tokens],
        }
