"""
Field value kinds and operations.

Four division-field kinds share the DivField contract:
RealF, RealD, ComplexF, ComplexD.
"""

from src.cladosf.fields.base import CardinalLike, DivField
from src.cladosf.fields.complex import ComplexD, ComplexF, ComplexField
from src.cladosf.fields.real import RealD, RealF, RealField

__all__ = [
    # Base
    "CardinalLike",
    "DivField",
    # Real kinds
    "RealField",
    "RealF",
    "RealD",
    # Complex kinds
    "ComplexField",
    "ComplexF",
    "ComplexD",
]
