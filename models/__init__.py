"""
Models Package - Part Naming Data Structures
=============================================
Vendor records in, generated names out.
"""

from models.naming_types import LogicalField, Strategy, FinishPolicy
from models.part_spec import CategoryHint, SpecificationRecord, PartSpec, RecordFormatError
from models.generated_name import DetectionResult, UNMATCHED, NameToken, GeneratedName

__all__ = [
    'LogicalField',
    'Strategy',
    'FinishPolicy',
    'CategoryHint',
    'SpecificationRecord',
    'PartSpec',
    'RecordFormatError',
    'DetectionResult',
    'UNMATCHED',
    'NameToken',
    'GeneratedName',
]
