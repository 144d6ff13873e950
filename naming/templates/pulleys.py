"""
Pulley Templates
================
Material, rope diameter or belt width, OD, Bearing Type.
"""

from typing import List

from models.naming_types import LogicalField
from naming import abbreviations
from naming.templates.base import OD_ALIASES, NamingTemplate, dimension, material, plain

ROPE_ALIASES = ("For Rope Diameter", "For Wire Rope Diameter", "Rope Diameter")
BELT_ALIASES = ("For Belt Width", "Belt Width", "For Belt Trade Size")


def _bearing_type():
    return plain(LogicalField.BEARING_TYPE, ("Bearing Type",), abbreviations.BEARING_TYPES, required=False)


def build() -> List[NamingTemplate]:
    rope = dimension(LogicalField.ROPE_DIAMETER, ROPE_ALIASES)
    belt = dimension(LogicalField.BELT_WIDTH, BELT_ALIASES)
    od = dimension(LogicalField.OUTER_DIAMETER, OD_ALIASES)

    rows = (
        ("wire_rope_pulley", "WRP", (material(), rope, od, _bearing_type())),
        ("rope_pulley", "RP", (material(), rope, od, _bearing_type())),
        ("v_belt_pulley", "VBP", (material(), belt, od, _bearing_type())),
        ("sheave", "SHV", (material(), rope, od, _bearing_type())),
        ("pulley", "PUL", (material(), od, _bearing_type())),
    )
    return [
        NamingTemplate(tag=tag, prefix=prefix, context="pulley", fields=fields)
        for tag, prefix, fields in rows
    ]
