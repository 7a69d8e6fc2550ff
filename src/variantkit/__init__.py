"""
Variantkit - tagged union values for Python.

A schema of named alternatives yields a builder with one constructor per
alternative. Each value holds exactly one alternative and its payload, and
supports predicates, unwrapping to a single-key mapping, and exhaustive or
defaulted pattern matching, both sync and async.
"""

from .builder import UnionBuilder, union
from .errors import (
    CardinalityError,
    NoHandlerError,
    ReservedNameError,
    UnknownKeyError,
    VariantError,
)
from .prelude import Option, Result
from .util import CATCH_ALL, UNIT
from .variant import Branches, VariantValue

__version__ = "0.1.0"

__all__ = [
    "UnionBuilder",
    "union",
    "VariantValue",
    "Branches",
    "Option",
    "Result",
    "UNIT",
    "CATCH_ALL",
    "VariantError",
    "ReservedNameError",
    "CardinalityError",
    "UnknownKeyError",
    "NoHandlerError",
]
