"""
Nut Templates
=============
All nuts: Material, Thread Size, Finish. Every locknut variant shares
the LN prefix.

Example: LN-SS188-4x40
"""

from typing import List

from models.naming_types import FinishPolicy
from naming.templates.base import NamingTemplate, finish, material, thread

LOCKNUTS = (
    "nylon_insert_locknut",
    "cotter_pin_locknut",
    "distorted_thread_locknut",
    "flex_top_locknut",
    "lock_washer_locknut",
    "serrations_locknut",
    "spring_stop_locknut",
    "steel_insert_locknut",
    "generic_locknut",
)

# (tag, prefix)
NUTS = (
    ("hex_nut", "HN"),
    ("wing_nut", "WN"),
    ("cap_nut", "CN"),
    ("flange_nut", "FN"),
    ("generic_nut", "N"),
    ("acorn_nut", "AN"),
    ("barrel_nut", "BN"),
    ("cage_nut", "CAGEN"),
    ("castle_nut", "CASN"),
    ("clinch_nut", "CLIN"),
    ("coupling_nut", "COUPN"),
    ("jam_nut", "JN"),
    ("knurled_thumb_nut", "KTN"),
    ("machine_screw_nut", "MSN"),
    ("panel_nut", "PN"),
    ("push_on_nut", "PON"),
    ("rivet_nut", "RN"),
    ("round_nut", "ROUNDN"),
    ("screw_mount_nut", "SMN"),
    ("snap_in_nut", "SIN"),
    ("socket_nut", "SN"),
    ("speed_nut", "SPEEDN"),
    ("square_nut", "SQN"),
    ("tamper_resistant_nut", "TRN"),
    ("threadless_nut", "TLN"),
    ("thumb_nut", "TN"),
    ("tube_end_nut", "TEN"),
    ("twist_close_nut", "TCN"),
    ("weld_nut", "WLN"),
    ("with_pilot_hole_nut", "PHN"),
)


def build() -> List[NamingTemplate]:
    rows = [(tag, "LN") for tag in LOCKNUTS] + list(NUTS)
    return [
        NamingTemplate(
            tag=tag,
            prefix=prefix,
            context="nut",
            fields=(material(), thread(), finish()),
            finish_policy=FinishPolicy.EXTRACT_FROM_MATERIAL,
        )
        for tag, prefix in rows
    ]
