"""
Part Specification - Vendor Record Data Model
==============================================
Raw product data as delivered by the vendor API client.

CRITICAL RULES:
- Values stay raw vendor text, never pre-parsed
- Field names keep vendor casing; lookups ignore case
- A record is immutable once it reaches the naming engine
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Iterator, List, Mapping, Optional, Tuple


class RecordFormatError(ValueError):
    """Raised when a product record cannot be read into a PartSpec."""
    pass


def _first_value(values: Any) -> str:
    """Vendor specs carry a list of values; the first one is authoritative."""
    if values is None:
        return ""
    if isinstance(values, (list, tuple)):
        return str(values[0]) if values else ""
    return str(values)


@dataclass(frozen=True)
class CategoryHint:
    """
    Vendor category and family descriptions (free text).

    Only the type detector reads these.
    """

    category: str = ""       # "Nuts", "Washers", "Screws"
    family: str = ""         # "18-8 SS Nylon-Insert Locknut"

    def to_dict(self) -> Dict[str, str]:
        return {"category": self.category, "family": self.family}


@dataclass(frozen=True)
class SpecificationRecord:
    """
    Ordered, read-only mapping of vendor field name to raw value.

    The same logical attribute may appear under several vendor names
    ("Thread Size", "Thread (A) Size"); the templates decide which wins.
    """

    specs: Mapping[str, str] = field(default_factory=dict)
    part_number: str = ""
    detail_description: str = ""

    def __post_init__(self):
        items = self.specs.items() if isinstance(self.specs, Mapping) else self.specs
        cleaned: Dict[str, str] = {}
        for name, value in items:
            name = str(name)
            if name not in cleaned:
                cleaned[name] = _first_value(value)
        object.__setattr__(self, "specs", MappingProxyType(cleaned))
        object.__setattr__(self, "part_number", (self.part_number or "").strip())
        object.__setattr__(self, "detail_description", self.detail_description or "")

    def __iter__(self) -> Iterator[str]:
        return iter(self.specs)

    def __len__(self) -> int:
        return len(self.specs)

    def items(self):
        return self.specs.items()

    def lookup(self, name: str) -> Optional[Tuple[str, str]]:
        """
        Case-insensitive field lookup.

        Returns:
            (vendor field name, raw value) of the first matching field, or None
        """
        wanted = name.casefold()
        for vendor_name, value in self.specs.items():
            if vendor_name.casefold() == wanted:
                return vendor_name, value
        return None

    def get(self, name: str, default: Optional[str] = None) -> Optional[str]:
        found = self.lookup(name)
        return found[1] if found else default

    def has_value(self, name: str) -> bool:
        """True if the field exists with a non-blank value."""
        value = self.get(name)
        return bool(value and value.strip())

    def to_dict(self) -> Dict[str, Any]:
        return {
            "part_number": self.part_number,
            "detail_description": self.detail_description,
            "specifications": dict(self.specs),
        }


@dataclass(frozen=True)
class PartSpec:
    """
    One product as handed over by the API client: hint plus record.
    """

    hint: CategoryHint
    record: SpecificationRecord

    @property
    def part_number(self) -> str:
        return self.record.part_number

    def to_dict(self) -> Dict[str, Any]:
        data = self.hint.to_dict()
        data.update(self.record.to_dict())
        return data

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> 'PartSpec':
        """
        Create from a vendor product-detail object or the flat export shape.

        Vendor shape:
            {"PartNumber", "ProductCategory", "FamilyDescription",
             "DetailDescription", "Specifications": [{"Attribute", "Values"}]}
        Flat shape:
            {"part_number", "category", "family", "detail_description",
             "specifications": {name: value} or [{"attribute", "values"}]}

        Raises:
            RecordFormatError: if the object is not a product record
        """
        if not isinstance(data, dict):
            raise RecordFormatError(f"Product record must be an object, got {type(data).__name__}")

        def pick(*keys: str) -> str:
            for key in keys:
                if data.get(key) is not None:
                    return str(data[key])
            return ""

        raw_specs = data.get("Specifications", data.get("specifications", []))
        specs = PartSpec._parse_specifications(raw_specs)

        return PartSpec(
            hint=CategoryHint(
                category=pick("ProductCategory", "category"),
                family=pick("FamilyDescription", "family"),
            ),
            record=SpecificationRecord(
                specs=specs,
                part_number=pick("PartNumber", "part_number"),
                detail_description=pick("DetailDescription", "detail_description"),
            ),
        )

    @staticmethod
    def _parse_specifications(raw_specs: Any) -> List[Tuple[str, str]]:
        if raw_specs is None:
            return []
        if isinstance(raw_specs, dict):
            return [(str(name), _first_value(value)) for name, value in raw_specs.items()]
        if not isinstance(raw_specs, list):
            raise RecordFormatError(
                f"Specifications must be a list or mapping, got {type(raw_specs).__name__}"
            )

        specs = []
        for entry in raw_specs:
            if not isinstance(entry, dict):
                raise RecordFormatError(f"Specification entry must be an object: {entry!r}")
            name = entry.get("Attribute", entry.get("attribute"))
            if not name:
                raise RecordFormatError(f"Specification entry without attribute name: {entry!r}")
            values = entry.get("Values", entry.get("values", entry.get("value")))
            specs.append((str(name), _first_value(values)))
        return specs
