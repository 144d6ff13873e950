"""
Test Value Converters
=====================
Fractions, thread sizes, screw sizes and material/finish splitting.
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from naming.abbreviations import FINISH_KEYWORDS
from naming.converters import (
    apply_filler,
    complete_metric_pitch,
    dimension,
    fraction_to_decimal,
    normalize_thread_size,
    refine_steel_grade,
    screw_size_number,
    split_material_finish,
    strip_units,
)


def test_fraction_to_decimal():
    """Exact decimal rendering of inch fractions."""
    print("\n=== TEST: Fraction -> Decimal ===")

    cases = {
        '1/4"': "0.25",
        '5/16"': "0.3125",
        '1-1/2"': "1.5",
        '5/8"': "0.625",
        "1 1/2": "1.5",
        '2"': "2",
        "3/3": "1",
        "1/3": "0.3333",
    }
    for raw, expected in cases.items():
        result = fraction_to_decimal(raw)
        print(f"  {raw!r:10} -> {result}")
        assert result == expected, f"{raw!r}: expected {expected}, got {result}"

    print("✅ PASSED")


def test_fraction_passthrough():
    """Unparseable text passes through without quote marks, never raises."""
    print("\n=== TEST: Fraction Passthrough ===")

    assert fraction_to_decimal('abc"') == "abc"
    assert fraction_to_decimal("1/0") == "1/0", "Division by zero must pass through"
    assert fraction_to_decimal("") == ""
    assert fraction_to_decimal("0.75") == "0.75"

    # Decimal inches render like the equivalent fraction
    assert fraction_to_decimal('0.250"') == "0.25" == fraction_to_decimal('1/4"')
    assert fraction_to_decimal("2.0") == "2"
    assert fraction_to_decimal(".5") == "0.5"
    assert dimension("12.50 mm") == "12.5"

    print("✅ PASSED")


def test_strip_units_and_dimension():
    print("\n=== TEST: Unit Stripping ===")

    assert strip_units('1/2"') == "1/2"
    assert strip_units("25 mm") == "25"
    assert strip_units("25mm") == "25"
    assert dimension('2"') == "2"
    assert dimension("12.5 mm") == "12.5"
    assert dimension('3/8"') == "0.375"

    print("✅ PASSED")


def test_normalize_thread_size():
    """Separator becomes 'x', fractions and pitch precision are kept."""
    print("\n=== TEST: Thread Size Normalizer ===")

    cases = {
        "8-32": "8x32",
        "4-40": "4x40",
        '1/4"-20': "1/4x20",
        "M3 x 0.50mm": "M3x0.50",
        "M8 x 1.25 mm": "M8x1.25",
        "No. 10-24": "10x24",
        "#10-32": "10x32",
        "1-1/4-7": "1-1/4x7",
        "M8": "M8",
        '1/4"-20 UNC': "1/4x20",
        "1/4-20 UNC-2A": "1/4x20",
        "10-32 UNF": "10x32",
    }
    for raw, expected in cases.items():
        result = normalize_thread_size(raw)
        print(f"  {raw!r:14} -> {result}")
        assert result == expected, f"{raw!r}: expected {expected}, got {result}"

    print("✅ PASSED")


def test_complete_metric_pitch():
    print("\n=== TEST: Metric Pitch Completion ===")

    detail = "Zinc-Plated Steel Hex Nut, M8 x 1.25 mm Thread"
    assert complete_metric_pitch("M8", detail) == "M8x1.25"
    assert complete_metric_pitch("M8", "", "1.25 mm") == "M8x1.25"
    assert complete_metric_pitch("M8", "no pitch here") == "M8"
    assert complete_metric_pitch("8x32", detail) == "8x32", "Non-metric sizes are left alone"

    print("✅ PASSED")


def test_screw_size_number():
    print("\n=== TEST: Screw Size Notation ===")

    assert screw_size_number("No. 6") == "6"
    assert screw_size_number("NO. 6") == "6"
    assert screw_size_number("#8") == "8"
    assert screw_size_number('1/4"') == "1/4"

    print("✅ PASSED")


def test_split_material_finish():
    """Longest finish keyword wins, remainder keeps the material."""
    print("\n=== TEST: Material / Finish Split ===")

    cases = {
        "Zinc-Plated Alloy Steel": ("Alloy Steel", "Zinc-Plated"),
        "Zinc Yellow-Chromate Plated Steel": ("Steel", "Zinc Yellow-Chromate Plated"),
        "Black-Oxide Alloy Steel": ("Alloy Steel", "Black-Oxide"),
        "18-8 Stainless Steel, Passivated": ("18-8 Stainless Steel", "Passivated"),
        "316 Stainless Steel": ("316 Stainless Steel", None),
    }
    for raw, expected in cases.items():
        result = split_material_finish(raw, FINISH_KEYWORDS)
        print(f"  {raw!r} -> {result}")
        assert result == expected, f"{raw!r}: expected {expected}, got {result}"

    # A finish word alone is not split off (nothing would be left)
    assert split_material_finish("Galvanized", FINISH_KEYWORDS) == ("Galvanized", None)

    print("✅ PASSED")


def test_refine_steel_grade():
    print("\n=== TEST: Steel Grade Refinement ===")

    assert refine_steel_grade("Alloy Steel", "Grade 8") == "Grade 8 Steel"
    assert refine_steel_grade("Steel", "Grade 5") == "Grade 5 Steel"
    assert refine_steel_grade("Steel", "Class 10.9") == "10.9 Steel"
    assert refine_steel_grade("Steel", "Grade 10.9") == "10.9 Steel"
    assert refine_steel_grade("Brass", "Grade 8") == "Brass", "Only plain steel is refined"
    assert refine_steel_grade("Steel", "") == "Steel"
    assert refine_steel_grade("Steel", "Unknown") == "Steel"

    print("✅ PASSED")


def test_apply_filler():
    print("\n=== TEST: Bearing Filler ===")

    assert apply_filler("Nylon Plastic", "MDS") == "MDS-Filled Nylon Plastic"
    assert apply_filler("Bronze", "Not Specified") == "Bronze"
    assert apply_filler("Bronze", "None") == "Bronze"
    assert apply_filler("Bronze", "") == "Bronze"

    print("✅ PASSED")


if __name__ == "__main__":
    print("=" * 60)
    print("VALUE CONVERTER TESTS")
    print("=" * 60)

    test_fraction_to_decimal()
    test_fraction_passthrough()
    test_strip_units_and_dimension()
    test_normalize_thread_size()
    test_complete_metric_pitch()
    test_screw_size_number()
    test_split_material_finish()
    test_refine_steel_grade()
    test_apply_filler()

    print("\n" + "=" * 60)
    print("ALL TESTS PASSED ✅")
    print("=" * 60)
