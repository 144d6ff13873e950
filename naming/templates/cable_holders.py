"""
Cable Holder Templates
======================
Material, Mount Type, For Maximum Bundle Diameter and, for screw-mounted
holders, For Screw Size (numbered notation kept).
"""

from typing import List

from models.naming_types import LogicalField
from naming import abbreviations
from naming.templates.base import NamingTemplate, dimension, material, plain, screw_size

BUNDLE_ALIASES = ("For Maximum Bundle Diameter", "For Bundle Diameter", "Max. Bundle Diameter")


def build() -> List[NamingTemplate]:
    holder_material = material(table=abbreviations.CABLE_HOLDER_MATERIALS)
    mount = plain(LogicalField.MOUNT_TYPE, ("Mount Type", "Mounting Type"), abbreviations.MOUNT_TYPES)
    bundle = dimension(LogicalField.BUNDLE_DIAMETER, BUNDLE_ALIASES)
    return [
        NamingTemplate(
            tag="cable_holder",
            prefix="CH",
            context="cable_holder",
            fields=(holder_material, mount, bundle, screw_size()),
        ),
        NamingTemplate(
            tag="generic_cable_holder",
            prefix="CH",
            context="cable_holder",
            fields=(holder_material, mount, bundle),
        ),
    ]
