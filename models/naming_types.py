"""
Naming Types - Logical Fields and Token Strategies
===================================================
Vocabulary shared by templates, resolver, generator and analyzer.

RULE: A LogicalField is a semantic attribute, never a vendor field name.
      Vendor spellings live in the templates' alias sets.
"""

from enum import Enum


class LogicalField(Enum):
    """
    Semantic part attributes, decoupled from vendor field names.

    The value is the display label used in analysis reports.
    """

    MATERIAL = "Material"
    HOUSING_MATERIAL = "Housing Material"
    THREAD_SIZE = "Thread Size"
    LENGTH = "Length"
    USABLE_LENGTH = "Usable Length"
    DRIVE_STYLE = "Drive Style"
    FINISH = "Finish"
    SCREW_SIZE = "Screw Size"
    # "For Screw Size" on washers, spacers and cable holders

    OUTER_DIAMETER = "OD"
    DIAMETER = "Diameter"
    SHAFT_DIAMETER = "Shaft Diameter"
    BORE = "Bore"
    WIDTH = "Width"
    OVERALL_HEIGHT = "Overall Height"
    HOLE_SPACING = "Mounting Hole Spacing"
    # "Mounting Hole Center-to-Center" on mounted bearings

    ROPE_DIAMETER = "Rope Diameter"
    BELT_WIDTH = "Belt Width"
    BEARING_TYPE = "Bearing Type"
    # Pulley bearing (Ball, Plain, Roller)

    BEARING_KIND = "Bearing Kind"
    # Free-text "Type" on generic bearings

    MOUNT_TYPE = "Mount Type"
    LATCHING_DISTANCE = "Latching Distance"
    LATCH_TYPE = "Latch Type"
    BUNDLE_DIAMETER = "Bundle Diameter"


class Strategy(Enum):
    """
    How a resolved raw value is interpreted before abbreviation.
    """

    MATERIAL = "material"
    # Finish split, steel grade refinement, bearing filler prefix

    FINISH = "finish"
    # Coating text; may come from the material when no Finish field exists

    THREAD = "thread"
    # "8-32" -> "8x32", "M3 x 0.50mm" -> "M3x0.50", fractions kept

    DIMENSION = "dimension"
    # '1/4"' -> "0.25", "25 mm" -> "25"

    SCREW_SIZE = "screw_size"
    # Context-sensitive: numbered notation or decimal, see resolver

    PLAIN = "plain"
    # Whitespace-normalized passthrough into an abbreviation table


class FinishPolicy(Enum):
    """
    What a template does when no explicit Finish field resolves.
    """

    NONE = "none"
    EXTRACT_FROM_MATERIAL = "extract_from_material"
    # "Zinc-Plated Alloy Steel" -> material "Alloy Steel", finish "Zinc-Plated"
