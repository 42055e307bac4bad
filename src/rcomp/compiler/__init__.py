"""Compiler passes for rcomp.

Submodules:
- partial_eval: constant folding of Neg/Add over literals
- uniquify: renaming of let bindings to program-wide unique names
- ir: flattened program (assignments + tail) data structures
- flatten: linearization of a uniquified tree into the flat IR
- pipeline: runs the passes in order

Python 3.10+
"""

from . import partial_eval
from . import uniquify
from . import ir
from . import flatten
from . import pipeline

__all__ = [
    "partial_eval",
    "uniquify",
    "ir",
    "flatten",
    "pipeline",
]
