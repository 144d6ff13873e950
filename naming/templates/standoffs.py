"""
Standoff Templates
==================
Material, Thread Size, Length, Finish.
"""

from typing import List

from models.naming_types import FinishPolicy, LogicalField
from naming.templates.base import LENGTH_ALIASES, NamingTemplate, dimension, finish, material, thread

STANDOFFS = (
    ("male_female_hex_standoff", "MFSO"),
    ("female_hex_standoff", "FSO"),
    ("generic_standoff", "SO"),
)


def build() -> List[NamingTemplate]:
    return [
        NamingTemplate(
            tag=tag,
            prefix=prefix,
            context="standoff",
            fields=(material(), thread(), dimension(LogicalField.LENGTH, LENGTH_ALIASES), finish()),
            finish_policy=FinishPolicy.EXTRACT_FROM_MATERIAL,
        )
        for tag, prefix in STANDOFFS
    ]
