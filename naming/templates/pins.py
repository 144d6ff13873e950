"""
Pin and Shaft Collar Templates
==============================
Pins:          Material, Diameter, Usable Length, Finish
Shaft collars: Material, For Shaft Diameter, OD, Width, Finish
"""

from typing import List

from models.naming_types import FinishPolicy, LogicalField
from naming.templates.base import (
    OD_ALIASES,
    SHAFT_ALIASES,
    NamingTemplate,
    dimension,
    finish,
    material,
)

PINS = (
    ("clevis_pin_with_retaining_ring_groove", "CPRRG"),
    ("clevis_pin", "CP"),
    ("generic_pin", "PIN"),
)

SHAFT_COLLARS = (
    ("face_mount_shaft_collar", "FMSC"),
    ("flange_mount_shaft_collar", "FLSC"),
    ("generic_shaft_collar", "SC"),
)


def build() -> List[NamingTemplate]:
    templates = [
        NamingTemplate(
            tag=tag,
            prefix=prefix,
            context="pin",
            fields=(
                material(),
                dimension(LogicalField.DIAMETER, ("Diameter", "Pin Diameter")),
                dimension(LogicalField.USABLE_LENGTH, ("Usable Length", "Length")),
                finish(),
            ),
            finish_policy=FinishPolicy.EXTRACT_FROM_MATERIAL,
        )
        for tag, prefix in PINS
    ]
    templates += [
        NamingTemplate(
            tag=tag,
            prefix=prefix,
            context="shaft_collar",
            fields=(
                material(),
                dimension(LogicalField.SHAFT_DIAMETER, SHAFT_ALIASES),
                dimension(LogicalField.OUTER_DIAMETER, OD_ALIASES),
                dimension(LogicalField.WIDTH, ("Width",)),
                finish(),
            ),
            finish_policy=FinishPolicy.EXTRACT_FROM_MATERIAL,
        )
        for tag, prefix in SHAFT_COLLARS
    ]
    return templates
