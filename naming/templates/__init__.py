"""
Template Registry
=================
All naming templates, registered once at import into a read-only
mapping: category tag -> NamingTemplate.
"""

from types import MappingProxyType
from typing import Dict, Mapping, Optional

from naming.templates import (
    bearings,
    cable_holders,
    latches,
    nuts,
    pins,
    pulleys,
    screws,
    spacers,
    standoffs,
    washers,
)
from naming.templates.base import FieldSpec, NamingTemplate

_MODULES = (screws, nuts, washers, spacers, standoffs, pins, bearings, pulleys, latches, cable_holders)


def _register() -> Mapping[str, NamingTemplate]:
    registry: Dict[str, NamingTemplate] = {}
    for module in _MODULES:
        for template in module.build():
            if template.tag in registry:
                raise ValueError(f"Duplicate naming template tag: {template.tag}")
            registry[template.tag] = template
    return MappingProxyType(registry)


TEMPLATES: Mapping[str, NamingTemplate] = _register()


def get_template(tag: Optional[str]) -> Optional[NamingTemplate]:
    if tag is None:
        return None
    return TEMPLATES.get(tag)


__all__ = ['FieldSpec', 'NamingTemplate', 'TEMPLATES', 'get_template']
