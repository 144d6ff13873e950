"""
Spacer Templates
================
Unthreaded spacers: Material, For Screw Size (as decimal), OD, Length, Finish.
Threaded spacers carry a Thread Size instead of a screw size.

Example: SP-ACET-0.25-0.5-2
"""

from typing import List

from models.naming_types import FinishPolicy, LogicalField
from naming.templates.base import (
    LENGTH_ALIASES,
    OD_ALIASES,
    NamingTemplate,
    dimension,
    finish,
    material,
    screw_size,
    thread,
)


def _unthreaded(tag: str, prefix: str, with_finish: bool = True) -> NamingTemplate:
    fields = [
        material(),
        screw_size(),
        dimension(LogicalField.OUTER_DIAMETER, OD_ALIASES),
        dimension(LogicalField.LENGTH, LENGTH_ALIASES),
    ]
    if with_finish:
        fields.append(finish())
    return NamingTemplate(
        tag=tag,
        prefix=prefix,
        context="spacer",
        fields=tuple(fields),
        finish_policy=FinishPolicy.EXTRACT_FROM_MATERIAL if with_finish else FinishPolicy.NONE,
    )


def build() -> List[NamingTemplate]:
    return [
        _unthreaded("unthreaded_spacer", "SP"),
        _unthreaded("aluminum_unthreaded_spacer", "ASP"),
        _unthreaded("stainless_steel_unthreaded_spacer", "SSSP"),
        # Nylon has no finish
        _unthreaded("nylon_unthreaded_spacer", "NSP", with_finish=False),
        NamingTemplate(
            tag="threaded_spacer",
            prefix="TSP",
            context="spacer",
            fields=(
                material(),
                thread(),
                dimension(LogicalField.OUTER_DIAMETER, OD_ALIASES, required=False),
                dimension(LogicalField.LENGTH, LENGTH_ALIASES),
                finish(),
            ),
            finish_policy=FinishPolicy.EXTRACT_FROM_MATERIAL,
        ),
    ]
