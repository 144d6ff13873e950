"""
Latch Templates
===============
Material, Mount Type, Latching Distance (draw and toggle latches),
Draw Latch Type, Finish.
"""

from typing import List

from models.naming_types import FinishPolicy, LogicalField
from naming import abbreviations
from naming.templates.base import NamingTemplate, dimension, finish, material, plain


def _material():
    return material(table=abbreviations.LATCH_MATERIALS)


def _mount():
    return plain(LogicalField.MOUNT_TYPE, ("Mount Type", "Mounting Type"), abbreviations.MOUNT_TYPES)


def _distance():
    return dimension(LogicalField.LATCHING_DISTANCE, ("Latching Distance", "Max. Latching Distance"))


def build() -> List[NamingTemplate]:
    rows = (
        ("draw_latch", "DL", (
            _material(), _mount(), _distance(),
            plain(LogicalField.LATCH_TYPE, ("Draw Latch Type", "Latch Type"), abbreviations.LATCH_TYPES,
                  required=False),
            finish(),
        )),
        ("toggle_latch", "TL", (_material(), _mount(), _distance(), finish())),
        ("compression_latch", "CL", (_material(), _mount(), finish())),
        ("slam_latch", "SL", (_material(), _mount(), finish())),
        ("generic_latch", "LATCH", (_material(), _mount(), finish())),
    )
    return [
        NamingTemplate(
            tag=tag,
            prefix=prefix,
            context="latch",
            fields=fields,
            finish_policy=FinishPolicy.EXTRACT_FROM_MATERIAL,
        )
        for tag, prefix, fields in rows
    ]
