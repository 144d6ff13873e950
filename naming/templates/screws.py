"""
Screw Templates
===============
Head-type screws: Material, Thread Size, Length, Drive Style, Finish.
Thumb, eye, hook and similar screws have no drive style.

Example: BHS-SS316-8x32-0.25-HEX
"""

from typing import List

from models.naming_types import FinishPolicy, LogicalField
from naming import abbreviations
from naming.templates.base import (
    LENGTH_ALIASES,
    NamingTemplate,
    dimension,
    finish,
    material,
    plain,
    thread,
)

# (tag, prefix)
HEAD_SCREWS = (
    ("button_head_screw", "BHS"),
    ("socket_head_screw", "SHS"),
    ("high_socket_head_screw", "HSHS"),
    ("low_socket_head_screw", "LSHS"),
    ("ultra_low_socket_head_screw", "ULSHS"),
    ("standard_socket_head_screw", "SSHS"),
    ("flat_head_screw", "FHS"),
    ("narrow_flat_head_screw", "NFHS"),
    ("standard_flat_head_screw", "SFHS"),
    ("undercut_flat_head_screw", "UFHS"),
    ("wide_flat_head_screw", "WFHS"),
    ("pan_head_screw", "PHS"),
    ("hex_head_screw", "HHS"),
    ("oval_head_screw", "OHS"),
    ("standard_oval_head_screw", "SOHS"),
    ("undercut_oval_head_screw", "UOHS"),
    ("square_head_screw", "SQHS"),
    ("binding_head_screw", "BNHS"),
    ("carriage_head_screw", "CRHS"),
    ("cheese_head_screw", "CHHS"),
    ("fillister_head_screw", "FILHS"),
    ("pancake_head_screw", "PCHS"),
    ("round_head_screw", "RDHS"),
    ("truss_head_screw", "TRHS"),
    ("rounded_head_screw", "RHS"),
    ("12_point_head_screw", "12PHS"),
    ("domed_head_screw", "DHS"),
    ("pentagon_head_screw", "PENHS"),
    ("headless_screw", "HLS"),
    ("captive_panel_screw", "CPS"),
    # Thread-forming variants
    ("thread_forming_button_head_screw", "TFBHS"),
    ("thread_forming_high_socket_head_screw", "TFHSHS"),
    ("thread_forming_low_socket_head_screw", "TFLSHS"),
    ("thread_forming_socket_head_screw", "TFSHS"),
    ("thread_forming_flat_head_screw", "TFFHS"),
    ("thread_forming_pan_head_screw", "TFPHS"),
    ("thread_forming_hex_head_screw", "TFHHS"),
    ("thread_forming_screw", "TFS"),
)

# Hand-turned and special-purpose screws, no drive style
HANDLE_SCREWS = (
    ("generic_screw", "SCREW"),
    ("thumb_screw", "THUMB"),
    ("four_arm_thumb_screw", "FATHUMB"),
    ("hex_thumb_screw", "HTHUMB"),
    ("multilobe_thumb_screw", "MLTHUMB"),
    ("rectangle_thumb_screw", "RECTHUMB"),
    ("round_thumb_screw", "RTHUMB"),
    ("spade_thumb_screw", "SPTHUMB"),
    ("two_arm_thumb_screw", "TATHUMB"),
    ("wing_thumb_screw", "WTHUMB"),
    ("t_handle_screw", "THS"),
    ("l_handle_screw", "LHS"),
    ("t_slot_screw", "TSS"),
    ("knob_screw", "KNOB"),
    ("eye_screw", "EYE"),
    ("hook_screw", "HOOK"),
    ("ring_screw", "RING"),
    ("tee_screw", "TEE"),
    ("threaded_screw", "TRDS"),
)


def _drive():
    return plain(LogicalField.DRIVE_STYLE, ("Drive Style", "Drive Type"), abbreviations.DRIVE_STYLES,
                 required=False)


def build() -> List[NamingTemplate]:
    templates = []
    for tag, prefix in HEAD_SCREWS:
        templates.append(NamingTemplate(
            tag=tag,
            prefix=prefix,
            context="screw",
            fields=(material(), thread(), dimension(LogicalField.LENGTH, LENGTH_ALIASES), _drive(), finish()),
            finish_policy=FinishPolicy.EXTRACT_FROM_MATERIAL,
        ))
    for tag, prefix in HANDLE_SCREWS:
        templates.append(NamingTemplate(
            tag=tag,
            prefix=prefix,
            context="screw",
            fields=(material(), thread(), dimension(LogicalField.LENGTH, LENGTH_ALIASES), finish()),
            finish_policy=FinishPolicy.EXTRACT_FROM_MATERIAL,
        ))
    return templates
