"""Verification status components.

- DrawSource / HashDrawSource / SeededDrawSource: controllable draws that
  replace uncontrolled randomness
- VerificationStatusAssigner: per-kind status distributions
"""

from factcheck_system.sifters.verification.draws import (
    DrawSource,
    HashDrawSource,
    SeededDrawSource,
    build_draw_source,
)
from factcheck_system.sifters.verification.status_assigner import (
    VerificationStatusAssigner,
)

__all__ = [
    "DrawSource",
    "HashDrawSource",
    "SeededDrawSource",
    "build_draw_source",
    "VerificationStatusAssigner",
]
