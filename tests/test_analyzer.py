"""
Test Name Analyzer
==================
Spec usage classification, missing fields, finish suggestions and the
two report renderers.
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import json

from models import CategoryHint, SpecificationRecord
from naming.analyzer import analyze, format_human, format_json
from naming.generator import generate_name


def _report(category, family_text, specs=None, part_number="", detail=""):
    record = SpecificationRecord(specs or {}, part_number=part_number, detail_description=detail)
    return analyze(CategoryHint(category, family_text), record)


def test_spec_usage_classification():
    print("\n=== TEST: Spec Usage ===")

    report = _report("Nuts", "Hex Nut", {
        "Material": "Brass",
        "Thread Size": "8-32",
        "Thread (A) Size": "6-32",
        "Fastener Strength Grade/Class": "Grade 5",
        "Color": "Gold",
    })
    status = {s.name: s.status for s in report.specs}
    print(f"  {status}")

    assert report.name == "HN-BRASS-8x32"
    assert status == {
        "Material": "used",
        "Thread Size": "used",
        "Thread (A) Size": "shadowed",
        "Fastener Strength Grade/Class": "auxiliary",
        "Color": "unmapped",
    }
    assert [s.name for s in report.used_specs] == ["Material", "Thread Size"]
    assert len(report.unused_specs) == 3
    assert report.unmapped == ["Color"]
    assert "Unmapped specification 'Color' = 'Gold'" in report.suggestions

    thread = next(s for s in report.specs if s.name == "Thread Size")
    assert thread.field == "Thread Size"
    assert thread.token == "8x32"

    print("✅ PASSED")


def test_missing_fields():
    print("\n=== TEST: Missing Fields ===")

    report = _report("Nuts", "Hex Nut")
    print(f"  missing: {report.missing}")
    assert report.name == "HN"
    assert report.missing == ["Material", "Thread Size", "Finish"]
    assert "Missing required field Material (looked for: Material)" in report.suggestions
    assert not any("Missing required field Finish" in s for s in report.suggestions), \
        "Optional fields are listed as missing but not flagged"

    print("✅ PASSED")


def test_finish_suggestion_from_family_text():
    """Finish only named in the family text -> suggested name with it."""
    print("\n=== TEST: Finish Suggestion ===")

    report = _report("Nuts", "Zinc-Plated Steel Hex Nut", {"Material": "Steel", "Thread Size": '1/4"-20'})
    print(f"  name:      {report.name}")
    print(f"  suggested: {report.suggested_name}")

    assert report.name == "HN-S-1/4x20", "Analysis never changes the generated name"
    assert report.inferred_finish == "ZP"
    assert report.suggested_name == "HN-S-1/4x20-ZP"

    print("✅ PASSED")


def test_extracted_finish_reported():
    report = _report("Nuts", "Hex Nut", {"Material": "Zinc-Plated Alloy Steel", "Thread Size": '1/4"-20'})

    finish = next(e for e in report.expected if e.field == "Finish")
    assert finish.present
    assert finish.origin == "extracted"
    assert finish.token == "ZP"
    assert report.suggested_name is None, "Nothing to suggest when the finish is already in the name"
    assert any("taken from material text -> ZP" in s for s in report.suggestions)


def test_fallback_report():
    report = _report("Unknown Widgets", "Ball Bearing Pillow Widget", part_number="12345A678")

    assert report.generated.is_fallback
    assert report.detected_tag is None
    assert report.template_prefix is None
    assert report.expected == []
    assert report.suggestions[0].startswith("No template matched")


def test_analyze_name_matches_generator():
    cases = [
        ("Nuts", "18-8 SS Nylon-Insert Locknut", {"Material": "18-8 Stainless Steel", "Thread Size": "4-40"}),
        ("Washers", "316 SS Flat Washer", {"Material": "316 Stainless Steel", "For Screw Size": "No. 6"}),
        ("Spacers", "Round Spacer", {"Material": "Acetal Plastic", "For Screw Size": '1/4"', "OD": '1/2"'}),
        ("Unknown Widgets", "Ball Bearing Pillow Widget", {}),
    ]
    for category, family_text, specs in cases:
        hint = CategoryHint(category, family_text)
        record = SpecificationRecord(specs, part_number="1")
        assert analyze(hint, record).name == generate_name(hint, record)


def test_json_report():
    print("\n=== TEST: JSON Report ===")

    report = _report("Nuts", "18-8 SS Nylon-Insert Locknut",
                     {"Material": "18-8 Stainless Steel", "Thread Size": "4-40", "Color": "Silver"},
                     part_number="91831A005")
    data = json.loads(format_json(report))

    assert data["name"] == "LN-SS188-4x40"
    assert data["part_number"] == "91831A005"
    assert data["detected_tag"] == "nylon_insert_locknut"
    assert data["template_prefix"] == "LN"
    assert data["unmapped_specs"] == ["Color"]
    assert data["missing_fields"] == ["Finish"]
    assert [t["token"] for t in data["tokens"]] == ["LN", "SS188", "4x40"]

    print("✅ PASSED")


def test_detail_description_reported():
    report = _report("Nuts", "Hex Nut", {"Material": "Steel", "Thread Size": "M8"},
                     detail="Hex Nut, M8 x 1.25 mm Thread")

    assert report.detail_description == "Hex Nut, M8 x 1.25 mm Thread"
    assert json.loads(format_json(report))["detail_description"] == "Hex Nut, M8 x 1.25 mm Thread"
    assert "Detail:    Hex Nut, M8 x 1.25 mm Thread" in format_human(report)

    bare = _report("Nuts", "Hex Nut", {"Material": "Steel"})
    assert json.loads(format_json(bare))["detail_description"] == ""
    assert "Detail:" not in format_human(bare)


def test_human_report_flags():
    print("\n=== TEST: Human Report ===")

    report = _report("Nuts", "18-8 SS Nylon-Insert Locknut",
                     {"Material": "18-8 Stainless Steel", "Thread Size": "4-40"})

    plain = format_human(report)
    assert "🏷️ Name: LN-SS188-4x40" in plain
    assert "📐 Template fields:" not in plain

    detailed = format_human(report, show_template=True, show_aliases=True)
    print(detailed)
    assert "📐 Template fields:" in detailed
    assert "aliases: Thread Size, Thread (A) Size, Thread (B) Size" in detailed

    fallback = format_human(_report("", ""))
    assert "fallback naming" in fallback
    assert "(no part number)" in fallback

    print("✅ PASSED")


if __name__ == "__main__":
    print("=" * 60)
    print("NAME ANALYZER TESTS")
    print("=" * 60)

    test_spec_usage_classification()
    test_missing_fields()
    test_finish_suggestion_from_family_text()
    test_extracted_finish_reported()
    test_fallback_report()
    test_analyze_name_matches_generator()
    test_json_report()
    test_detail_description_reported()
    test_human_report_flags()

    print("\n" + "=" * 60)
    print("ALL TESTS PASSED ✅")
    print("=" * 60)
