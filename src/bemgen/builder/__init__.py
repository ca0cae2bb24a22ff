"""Model builder: classification of stylesheet files and descriptor merging."""

from bemgen.builder.classify import Classification, classify, strip_suffix
from bemgen.builder.merge import (
    apply,
    apply_block_mod,
    apply_block_root,
    apply_elem_mod,
    apply_elem_root,
    build_descriptor,
    finalize,
    start_descriptor,
)

__all__ = [
    "Classification",
    "apply",
    "apply_block_mod",
    "apply_block_root",
    "apply_elem_mod",
    "apply_elem_root",
    "build_descriptor",
    "classify",
    "finalize",
    "start_descriptor",
    "strip_suffix",
]
