"""
Test Part Spec Model
====================
Vendor and flat record shapes, read-only records, lookup rules.
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest

from models import PartSpec, RecordFormatError, SpecificationRecord


VENDOR_RECORD = {
    "PartNumber": "91831A005",
    "ProductCategory": "Nuts",
    "FamilyDescription": "18-8 SS Nylon-Insert Locknut",
    "DetailDescription": "18-8 Stainless Steel Nylon-Insert Locknut, 4-40 Thread Size",
    "Specifications": [
        {"Attribute": "Material", "Values": ["18-8 Stainless Steel"]},
        {"Attribute": "Thread Size", "Values": ["4-40", "4-48"]},
    ],
}


def test_vendor_shape():
    print("\n=== TEST: Vendor Record Shape ===")

    part = PartSpec.from_dict(VENDOR_RECORD)
    print(f"  {part.to_dict()}")

    assert part.part_number == "91831A005"
    assert part.hint.category == "Nuts"
    assert part.hint.family == "18-8 SS Nylon-Insert Locknut"
    assert part.record.get("Material") == "18-8 Stainless Steel"
    assert part.record.get("Thread Size") == "4-40", "First listed value is authoritative"
    assert list(part.record) == ["Material", "Thread Size"], "Vendor order is kept"

    print("✅ PASSED")


def test_flat_shape():
    part = PartSpec.from_dict({
        "part_number": "94639A101",
        "category": "Spacers",
        "family": "Round Spacer",
        "specifications": {"Material": "Acetal Plastic", "OD": '1/2"'},
    })
    assert part.part_number == "94639A101"
    assert part.record.get("OD") == '1/2"'

    listed = PartSpec.from_dict({"specifications": [{"attribute": "Length", "value": '2"'}]})
    assert listed.record.get("Length") == '2"'
    assert listed.hint.family == ""


def test_duplicate_field_first_wins():
    record = SpecificationRecord([("Material", "Brass"), ("Material", "Steel")])
    assert record.get("Material") == "Brass"
    assert len(record) == 1


def test_invalid_records():
    print("\n=== TEST: Invalid Records ===")

    bad = [
        ["not", "a", "record"],
        {"Specifications": "Material: Brass"},
        {"Specifications": ["Material"]},
        {"Specifications": [{"Values": ["Brass"]}]},
    ]
    for data in bad:
        with pytest.raises(RecordFormatError):
            PartSpec.from_dict(data)
        print(f"  rejected: {data!r}")

    assert issubclass(RecordFormatError, ValueError)

    print("✅ PASSED")


def test_record_is_read_only():
    record = SpecificationRecord({"Material": "Brass"})
    with pytest.raises(TypeError):
        record.specs["Material"] = "Steel"
    with pytest.raises(AttributeError):
        record.part_number = "X"


def test_lookup_ignores_case():
    record = SpecificationRecord({"Thread Size": "8-32", "Finish": "  "})

    assert record.lookup("thread size") == ("Thread Size", "8-32")
    assert record.get("THREAD SIZE") == "8-32"
    assert record.get("Length") is None
    assert record.get("Length", "") == ""
    assert record.has_value("Thread Size")
    assert not record.has_value("Finish"), "Blank values do not count"


def test_values_are_kept_raw():
    record = SpecificationRecord({"Length": 2, "Thread Size": None}, part_number="  12345A678 ")
    assert record.get("Length") == "2"
    assert record.get("Thread Size") == ""
    assert record.part_number == "12345A678"


if __name__ == "__main__":
    print("=" * 60)
    print("PART SPEC MODEL TESTS")
    print("=" * 60)

    test_vendor_shape()
    test_flat_shape()
    test_duplicate_field_first_wins()
    test_invalid_records()
    test_record_is_read_only()
    test_lookup_ignores_case()
    test_values_are_kept_raw()

    print("\n" + "=" * 60)
    print("ALL TESTS PASSED ✅")
    print("=" * 60)
