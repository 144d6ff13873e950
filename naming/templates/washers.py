"""
Washer Templates
================
Material, For Screw Size (numbered notation kept), Finish.

Example: FW-SS316-6
"""

from typing import List

from models.naming_types import FinishPolicy
from naming.templates.base import NamingTemplate, finish, material, screw_size

# (tag, prefix)
WASHERS = (
    ("cup_washer", "CW"),
    ("curved_washer", "CRVW"),
    ("dished_washer", "DW"),
    ("domed_washer", "DMW"),
    ("double_clipped_washer", "DCW"),
    ("clipped_washer", "CLW"),
    ("flat_washer", "FW"),
    ("hillside_washer", "HW"),
    ("notched_washer", "NW"),
    ("perforated_washer", "PW"),
    ("pronged_washer", "PRW"),
    ("rectangular_washer", "RW"),
    ("sleeve_washer", "SW"),
    ("slotted_washer", "SLW"),
    ("spherical_washer", "SPW"),
    ("split_washer", "SPLW"),
    ("square_washer", "SQW"),
    ("tab_washer", "TW"),
    ("tapered_washer", "TPW"),
    ("tooth_washer", "TOW"),
    ("wave_washer", "WW"),
    ("wedge_washer", "WDW"),
)


def build() -> List[NamingTemplate]:
    return [
        NamingTemplate(
            tag=tag,
            prefix=prefix,
            context="washer",
            fields=(material(), screw_size(), finish()),
            finish_policy=FinishPolicy.EXTRACT_FROM_MATERIAL,
        )
        for tag, prefix in WASHERS
    ]
