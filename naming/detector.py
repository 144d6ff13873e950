"""
Type Detector - Ordered Rule Chain
==================================
Maps category/family text (plus a few record fields) to a template tag.

CRITICAL RULES:
- RULES is evaluated top-down, first match wins
- Specific before generic: thread-forming before head types,
  "ultra low socket head" before "low socket head", locknut variants
  before washers, mounted bearings before ball bearings
- Matching runs on case-folded, whitespace-collapsed text
- Families named only by loose family text (bearings, pins, collars,
  pulleys, latches, cable holders) also need the category to agree or
  a dimension field of that family in the record
"""

import logging
from dataclasses import dataclass
from typing import Callable, Optional, Sequence, Tuple, Union

from models.generated_name import UNMATCHED, DetectionResult
from models.part_spec import CategoryHint, SpecificationRecord
from utils_text import contains_any, contains_word, fold

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Subject:
    """Pre-folded detection input."""

    family: str
    category: str
    detail: str
    record: SpecificationRecord

    @staticmethod
    def of(hint: CategoryHint, record: Optional[SpecificationRecord] = None) -> 'Subject':
        record = record if record is not None else SpecificationRecord()
        return Subject(
            family=fold(hint.family),
            category=fold(hint.category),
            detail=fold(record.detail_description),
            record=record,
        )


Predicate = Callable[[Subject], bool]


@dataclass(frozen=True)
class DetectionRule:
    name: str
    tag: str
    predicate: Predicate

    def matches(self, subject: Subject) -> bool:
        return self.predicate(subject)


# ==============================================================================
# PREDICATES
# ==============================================================================

def family(*terms: str) -> Predicate:
    return lambda s: contains_any(s.family, terms)


def family_word(*words: str) -> Predicate:
    return lambda s: any(contains_word(s.family, w) for w in words)


def category(*terms: str) -> Predicate:
    return lambda s: contains_any(s.category, terms)


def detail(*terms: str) -> Predicate:
    return lambda s: contains_any(s.detail, terms)


def has_field(*names: str) -> Predicate:
    return lambda s: any(s.record.has_value(n) for n in names)


def field_has(name: str, *terms: str) -> Predicate:
    return lambda s: contains_any(fold(s.record.get(name, "")), terms)


def all_of(*predicates: Predicate) -> Predicate:
    return lambda s: all(p(s) for p in predicates)


def any_of(*predicates: Predicate) -> Predicate:
    return lambda s: any(p(s) for p in predicates)


def not_(predicate: Predicate) -> Predicate:
    return lambda s: not predicate(s)


def always(s: Subject) -> bool:
    return True


Row = Tuple[str, Union[Tuple[str, ...], Predicate]]


def _group(label: str, gate: Predicate, rows: Sequence[Row]) -> Tuple[DetectionRule, ...]:
    """
    Rules of one part family, each AND-ed with the family gate.

    A row is (tag, family terms) or (tag, predicate).
    """
    rules = []
    for tag, test in rows:
        if isinstance(test, tuple):
            name = f"{label}: family has " + " | ".join(f"'{t}'" for t in test)
            test = family(*test)
        else:
            name = f"{label}: {tag}"
        rules.append(DetectionRule(name, tag, all_of(gate, test)))
    return tuple(rules)


# ==============================================================================
# RULE TABLE
# ==============================================================================

# "Screw-Mount Cable Holder", 'Flat Washer for 1/4" Screws' are not screws
_WASHER_NAMED = all_of(family("washer"), not_(category("screw")))
_SCREW = all_of(
    family("screw"),
    not_(family("screw-mount", "screw mount", "for screw", "for no.", "cable")),
    not_(_WASHER_NAMED),
)
_LOCKNUT = family("locknut", "lock nut")
_NUT = any_of(category("nut"), family("nut"))
_THREAD_FIELDS = ("Thread Size", "Thread (A) Size", "Thread (B) Size")

LOCKNUT_RULES = _group("locknut", _NUT, (
    ("cotter_pin_locknut", all_of(_LOCKNUT, family("cotter pin"))),
    ("distorted_thread_locknut", all_of(_LOCKNUT, family("distorted thread", "distorted-thread"))),
    ("flex_top_locknut", all_of(_LOCKNUT, family("flex-top", "flex top"))),
    ("lock_washer_locknut", all_of(_LOCKNUT, family("lock washer"))),
    ("nylon_insert_locknut", ("nylon insert", "nylon-insert")),
    ("serrations_locknut", all_of(_LOCKNUT, family("serrations", "serrated"))),
    ("spring_stop_locknut", all_of(_LOCKNUT, family("spring-stop", "spring stop"))),
    ("steel_insert_locknut", all_of(_LOCKNUT, family("steel insert", "steel-insert"))),
    ("generic_locknut", _LOCKNUT),
    # Nut names that also contain "screw"
    ("machine_screw_nut", ("machine screw nut",)),
    ("screw_mount_nut", ("screw mount", "screw-mount")),
))

_TF = family("thread-forming", "thread forming")

SCREW_RULES = _group("screw", _SCREW, (
    ("thread_forming_button_head_screw", all_of(_TF, family("button head"))),
    ("thread_forming_high_socket_head_screw", all_of(_TF, family("high socket head"))),
    ("thread_forming_low_socket_head_screw", all_of(_TF, family("low socket head", "low-profile socket head"))),
    ("thread_forming_socket_head_screw", all_of(_TF, family("socket head"))),
    ("thread_forming_flat_head_screw", all_of(_TF, family("flat head"))),
    ("thread_forming_pan_head_screw", all_of(_TF, family("pan head"))),
    ("thread_forming_hex_head_screw", all_of(_TF, family("hex head"))),
    ("thread_forming_screw", _TF),
    ("button_head_screw", ("button head",)),
    ("high_socket_head_screw", ("high socket head",)),
    ("ultra_low_socket_head_screw", ("ultra low socket head", "ultra low-profile socket head",
                                     "ultra-low socket head", "ultra-low-profile socket head")),
    ("low_socket_head_screw", ("low socket head", "low-profile socket head")),
    ("standard_socket_head_screw", ("standard socket head",)),
    ("socket_head_screw", ("socket head",)),
    ("narrow_flat_head_screw", ("narrow flat head",)),
    ("standard_flat_head_screw", ("standard flat head",)),
    ("undercut_flat_head_screw", ("undercut flat head",)),
    ("wide_flat_head_screw", ("wide flat head",)),
    ("flat_head_screw", ("flat head",)),
    ("pan_head_screw", ("pan head",)),
    ("hex_head_screw", ("hex head",)),
    ("standard_oval_head_screw", ("standard oval head",)),
    ("undercut_oval_head_screw", ("undercut oval head",)),
    ("oval_head_screw", ("oval head",)),
    ("square_head_screw", ("square head",)),
    ("binding_head_screw", ("binding head",)),
    ("carriage_head_screw", ("carriage head",)),
    ("cheese_head_screw", ("cheese head",)),
    ("fillister_head_screw", ("fillister head",)),
    ("pancake_head_screw", ("pancake head",)),
    ("round_head_screw", ("round head",)),
    ("truss_head_screw", ("truss head",)),
    ("rounded_head_screw", ("rounded head",)),
    ("12_point_head_screw", ("12-point", "12 point")),
    ("t_handle_screw", ("t-handle",)),
    ("t_slot_screw", ("t-slot",)),
    ("l_handle_screw", ("l-handle",)),
    ("domed_head_screw", ("domed",)),
    ("headless_screw", ("headless",)),
    ("pentagon_head_screw", ("pentagon",)),
    ("four_arm_thumb_screw", ("four arm thumb", "four-arm thumb")),
    ("hex_thumb_screw", ("hex thumb",)),
    ("multilobe_thumb_screw", ("multilobe thumb",)),
    ("rectangle_thumb_screw", ("rectangle thumb",)),
    ("round_thumb_screw", ("round thumb",)),
    ("spade_thumb_screw", ("spade thumb",)),
    ("two_arm_thumb_screw", ("two arm thumb", "two-arm thumb")),
    ("wing_thumb_screw", ("wing thumb",)),
    ("thumb_screw", ("thumb",)),
    ("captive_panel_screw", ("captive panel",)),
    ("hook_screw", family_word("hook")),
    ("ring_screw", family_word("ring")),
    ("eye_screw", family_word("eye", "eyebolt")),
    ("knob_screw", family_word("knob")),
    ("threaded_screw", family_word("threaded")),
    ("tee_screw", family_word("tee")),
    ("generic_screw", always),
))

WASHER_RULES = _group("washer", family("washer"), (
    ("cup_washer", family_word("cup")),
    ("curved_washer", ("curved",)),
    ("dished_washer", ("dished",)),
    ("domed_washer", ("domed",)),
    ("double_clipped_washer", ("double clipped", "double-clipped")),
    ("clipped_washer", ("clipped",)),
    ("hillside_washer", ("hillside",)),
    ("notched_washer", ("notched",)),
    ("perforated_washer", ("perforated",)),
    ("pronged_washer", ("pronged",)),
    ("rectangular_washer", ("rectangular",)),
    ("sleeve_washer", ("sleeve",)),
    ("slotted_washer", ("slotted",)),
    ("spherical_washer", ("spherical",)),
    ("split_washer", ("split",)),
    ("square_washer", ("square",)),
    ("tab_washer", family_word("tab")),
    ("tapered_washer", ("tapered",)),
    ("tooth_washer", ("tooth",)),
    ("wave_washer", ("wave",)),
    ("wedge_washer", ("wedge",)),
    ("flat_washer", always),
))

NUT_RULES = _group("nut", _NUT, (
    ("acorn_nut", ("acorn nut", "acornnut")),
    ("barrel_nut", ("barrel nut",)),
    ("cage_nut", ("cage nut",)),
    ("castle_nut", ("castle nut",)),
    ("clinch_nut", ("clinch nut",)),
    ("coupling_nut", ("coupling nut",)),
    ("flange_nut", ("flange nut", "flangenut")),
    ("hex_nut", ("hex nut", "hexnut")),
    ("jam_nut", ("jam nut",)),
    ("knurled_thumb_nut", ("knurled thumb nut",)),
    ("panel_nut", ("panel nut",)),
    ("push_on_nut", ("push on nut", "push-on nut")),
    ("rivet_nut", ("rivet nut",)),
    ("round_nut", ("round nut",)),
    ("snap_in_nut", ("snap in", "snap-in")),
    ("socket_nut", ("socket nut",)),
    ("speed_nut", ("speed",)),
    ("square_nut", ("square",)),
    ("tamper_resistant_nut", ("tamper resistant", "tamper-resistant")),
    ("threadless_nut", ("threadless",)),
    ("thumb_nut", ("thumb",)),
    ("tube_end_nut", ("tube end",)),
    ("twist_close_nut", ("twist close", "twist-close")),
    ("weld_nut", ("weld",)),
    ("with_pilot_hole_nut", ("with pilot hole",)),
    ("wing_nut", ("wing nut", "wingnut")),
    ("cap_nut", ("cap nut", "capnut")),
    ("generic_nut", always),
))

STANDOFF_RULES = _group("standoff", any_of(category("standoff"), family("standoff")), (
    ("male_female_hex_standoff", ("male-female", "male female")),
    ("female_hex_standoff", all_of(family("female"), family("threaded"))),
    ("generic_standoff", always),
))

SPACER_RULES = _group("spacer", family("spacer"), (
    ("threaded_spacer", all_of(has_field(*_THREAD_FIELDS), not_(family("unthreaded")))),
    ("aluminum_unthreaded_spacer", ("aluminum",)),
    ("stainless_steel_unthreaded_spacer", ("stainless steel", "18-8", "316")),
    ("nylon_unthreaded_spacer", ("nylon",)),
    ("unthreaded_spacer", always),
))

PULLEY_RULES = _group(
    "pulley",
    any_of(
        category("pulley"),
        all_of(family("pulley", "sheave"),
               has_field("OD", "For Rope Diameter", "For Wire Rope Diameter", "For Belt Width", "Bearing Type")),
    ),
    (
        ("wire_rope_pulley", ("wire rope",)),
        ("rope_pulley", ("rope",)),
        ("v_belt_pulley", ("v-belt", "belt")),
        ("sheave", ("sheave",)),
        ("pulley", always),
    ),
)

_MOUNTED = any_of(family("mounted"), category("mounted"))
_MOUNT_STYLE = "Mounted Bearing Type"
_FLANGE_MOUNT = any_of(field_has(_MOUNT_STYLE, "flange"), all_of(not_(has_field(_MOUNT_STYLE)), family("flange")))
_LOW_PROFILE = any_of(family("low-profile", "low profile"), detail("low-profile", "low profile"))
_PILLOW = any_of(field_has(_MOUNT_STYLE, "pillow"), all_of(not_(has_field(_MOUNT_STYLE)), family("pillow")))
_FLANGED = any_of(family("flanged"), field_has("Plain Bearing Type", "flanged"))

BEARING_RULES = _group(
    "bearing",
    any_of(
        category("bearing"),
        all_of(family("bearing"),
               has_field("Bore", "For Shaft Diameter", "Shaft Diameter", "OD",
                         "Housing Material", "Mounted Bearing Type", "Plain Bearing Type")),
    ),
    (
        ("low_profile_flange_mounted_ball_bearing", all_of(_MOUNTED, _FLANGE_MOUNT, _LOW_PROFILE)),
        ("flange_mounted_ball_bearing", all_of(_MOUNTED, _FLANGE_MOUNT)),
        ("pillow_block_mounted_ball_bearing", all_of(_MOUNTED, _PILLOW)),
        ("generic_mounted_bearing", _MOUNTED),
        ("flanged_sleeve_bearing", all_of(_FLANGED, family("sleeve", "plain"))),
        ("flanged_bearing", _FLANGED),
        ("sleeve_bearing", ("sleeve", "plain")),
        ("ball_bearing", ("ball",)),
        ("linear_bearing", ("linear",)),
        ("needle_bearing", ("needle",)),
        ("roller_bearing", ("roller",)),
        ("generic_bearing", always),
    ),
)

SHAFT_COLLAR_RULES = _group(
    "shaft collar",
    any_of(
        category("shaft collar"),
        all_of(family("shaft collar"), has_field("For Shaft Diameter", "Shaft Diameter", "ID")),
    ),
    (
        ("face_mount_shaft_collar", ("face-mount", "face mount")),
        ("flange_mount_shaft_collar", ("flange-mount", "flange mount")),
        ("generic_shaft_collar", always),
    ),
)

PIN_RULES = _group(
    "pin",
    any_of(
        category("pins"),
        all_of(family_word("pin"), has_field("Diameter", "Pin Diameter", "Usable Length")),
    ),
    (
        ("clevis_pin_with_retaining_ring_groove", ("clevis pin with retaining ring groove",)),
        ("clevis_pin", ("clevis pin", "clevis")),
        ("generic_pin", always),
    ),
)

LATCH_RULES = _group(
    "latch",
    any_of(
        category("latch"),
        all_of(family("latch"), has_field("Mount Type", "Mounting Type", "Latching Distance")),
    ),
    (
        ("draw_latch", ("draw latch", "draw-latch")),
        ("toggle_latch", ("toggle",)),
        ("compression_latch", ("compression",)),
        ("slam_latch", ("slam",)),
        ("generic_latch", always),
    ),
)

CABLE_HOLDER_RULES = _group(
    "cable holder",
    any_of(
        category("cable holder", "cable clip"),
        all_of(family("cable holder", "cable clip", "cable clamp"),
               has_field("For Maximum Bundle Diameter", "For Bundle Diameter", "Max. Bundle Diameter")),
    ),
    (
        ("cable_holder", has_field("For Screw Size")),
        ("generic_cable_holder", always),
    ),
)

RULES: Tuple[DetectionRule, ...] = (
    LOCKNUT_RULES
    + SCREW_RULES
    + WASHER_RULES
    + NUT_RULES
    + STANDOFF_RULES
    + SPACER_RULES
    + PULLEY_RULES
    + BEARING_RULES
    + SHAFT_COLLAR_RULES
    + PIN_RULES
    + LATCH_RULES
    + CABLE_HOLDER_RULES
)


def detect(hint: CategoryHint, record: Optional[SpecificationRecord] = None,
           rules: Sequence[DetectionRule] = RULES) -> DetectionResult:
    """
    Returns the tag of the first rule that fires, or UNMATCHED.
    """
    subject = Subject.of(hint, record)
    for rule in rules:
        if rule.matches(subject):
            logger.debug(f"Detected '{rule.tag}' via [{rule.name}] for family '{hint.family}'")
            return DetectionResult(tag=rule.tag, rule=rule.name)
    logger.debug(f"No detection rule matched family '{hint.family}' / category '{hint.category}'")
    return UNMATCHED
