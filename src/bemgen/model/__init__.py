"""bemgen model layer -- public type re-exports."""

from bemgen.model.descriptor import Descriptor, StyleRef
from bemgen.model.diagnostic import Diagnostic, Severity
from bemgen.model.entity import BemEntity, EntityKind

__all__ = [
    # entity
    "EntityKind",
    "BemEntity",
    # descriptor
    "StyleRef",
    "Descriptor",
    # diagnostic
    "Severity",
    "Diagnostic",
]
