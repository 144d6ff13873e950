"""
Bearing Templates
=================
Plain and rolling bearings name the bearing material (with its filler,
e.g. "MDS-Filled Nylon Plastic"), mounted bearings name the housing.

Examples:
    FSB-MDSNYL-0.25-0.375-0.5
    PBMBB-CI-0.5-2.75-1.44
"""

from typing import List

from models.naming_types import LogicalField
from naming import abbreviations
from naming.templates.base import (
    LENGTH_ALIASES,
    OD_ALIASES,
    SHAFT_ALIASES,
    NamingTemplate,
    dimension,
    material,
    plain,
)

HOLE_SPACING_ALIASES = (
    "Mounting Hole Center-to-Center",
    "Mounting Hole Center -to-Center",
    "Mounting Hole Spacing",
)


def _bearing_material():
    return material(table=abbreviations.BEARING_MATERIALS)


def _shaft():
    return dimension(LogicalField.SHAFT_DIAMETER, SHAFT_ALIASES)


def _od():
    return dimension(LogicalField.OUTER_DIAMETER, OD_ALIASES)


def _length():
    return dimension(LogicalField.LENGTH, LENGTH_ALIASES)


def _bore():
    return dimension(LogicalField.BORE, ("Bore", "ID", "For Shaft Diameter"))


def _housing():
    return material(("Housing Material", "Material"), field=LogicalField.HOUSING_MATERIAL)


def build() -> List[NamingTemplate]:
    rows = (
        ("flanged_sleeve_bearing", "FSB", (_bearing_material(), _shaft(), _od(), _length())),
        ("sleeve_bearing", "SB", (_bearing_material(), _shaft(), _od(), _length())),
        ("flanged_bearing", "FB", (_bearing_material(), _shaft(), _od(), _length())),
        ("ball_bearing", "BB", (_bearing_material(), _bore(), _od())),
        ("linear_bearing", "LB", (_bearing_material(), _shaft(), _length())),
        ("needle_bearing", "NB", (_bearing_material(), _bore(), _od(), _length())),
        ("roller_bearing", "RB", (_bearing_material(), _bore(), _od(), _length())),
        ("generic_bearing", "BRG", (
            _bearing_material(),
            plain(LogicalField.BEARING_KIND, ("Type", "Bearing Type", "Plain Bearing Type"),
                  abbreviations.BEARING_TYPES, required=False),
        )),
    )
    templates = [
        NamingTemplate(tag=tag, prefix=prefix, context="bearing", fields=fields)
        for tag, prefix, fields in rows
    ]

    mounted = (
        ("flange_mounted_ball_bearing", "MFBB"),
        ("low_profile_flange_mounted_ball_bearing", "LPMFBB"),
        ("pillow_block_mounted_ball_bearing", "PBMBB"),
    )
    for tag, prefix in mounted:
        templates.append(NamingTemplate(
            tag=tag,
            prefix=prefix,
            context="mounted_bearing",
            fields=(
                _housing(),
                _shaft(),
                dimension(LogicalField.HOLE_SPACING, HOLE_SPACING_ALIASES),
                dimension(LogicalField.OVERALL_HEIGHT, ("Overall Height", "Height")),
            ),
        ))
    templates.append(NamingTemplate(
        tag="generic_mounted_bearing",
        prefix="MBB",
        context="mounted_bearing",
        fields=(
            _housing(),
            _shaft(),
            dimension(LogicalField.OVERALL_HEIGHT, ("Overall Height", "Height"), required=False),
        ),
    ))
    return templates
