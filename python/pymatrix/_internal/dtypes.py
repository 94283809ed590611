from __future__ import annotations

import decimal
import fractions
from typing import Any, Protocol, runtime_checkable

import numpy as np


@runtime_checkable
class HasIdentityElements(Protocol):
    """Coefficient classes that know their own additive/multiplicative identities."""

    @classmethod
    def zero(cls) -> Any: ...

    @classmethod
    def one(cls) -> Any: ...


_TOKENS: dict[str, Any] = {
    "int": int,
    "integer": int,
    "i64": int,
    "float": float,
    "float64": float,
    "f64": float,
    "double": float,
    "complex": complex,
    "complex128": complex,
    "bool": bool,
    "bool_": bool,
    "fraction": fractions.Fraction,
    "rational": fractions.Fraction,
    "decimal": decimal.Decimal,
}


def normalize_coefficient(coefficient: Any) -> Any:
    """Normalize a user-provided coefficient type into something that builds values.

    Accepted inputs include:
    - Python types: int, float, complex, bool, Fraction, Decimal, ...
    - Case-insensitive strings: "int", "F64", "fraction", "decimal", ...
      NumPy names ("float32", "uint8", ...) are resolved through NumPy.
    - NumPy dtypes/scalar types: np.float32, np.dtype("int16"), ...
    - Any class implementing `zero()`/`one()` classmethods.

    Returns a callable accepting 0 and 1, or a `HasIdentityElements` class.
    """

    if coefficient is None:
        return int

    if isinstance(coefficient, str):
        s = coefficient.strip().lower()
        if s in _TOKENS:
            return _TOKENS[s]
        try:
            return np.dtype(s).type
        except TypeError:
            raise TypeError(f"Unknown coefficient type token {coefficient!r}") from None

    if isinstance(coefficient, np.dtype):
        return coefficient.type

    if isinstance(coefficient, type):
        return coefficient

    raise TypeError(
        f"Coefficient type must be a type, a NumPy dtype or a string token, got {coefficient!r}"
    )


def zero_of(coefficient: Any) -> Any:
    ctype = normalize_coefficient(coefficient)
    if isinstance(ctype, HasIdentityElements):
        return ctype.zero()
    return ctype(0)


def one_of(coefficient: Any) -> Any:
    ctype = normalize_coefficient(coefficient)
    if isinstance(ctype, HasIdentityElements):
        return ctype.one()
    return ctype(1)


def coefficient_kind(value: Any) -> str:
    """Coarse numeric kind of a coefficient, used to detect mixed literals.

    Returns one of "bool", "int", "float", "complex", "exact" (Fraction/
    Decimal) or the type name for anything else.
    """

    if isinstance(value, np.generic):
        kind = value.dtype.kind
        if kind == "b":
            return "bool"
        if kind in ("i", "u"):
            return "int"
        if kind == "f":
            return "float"
        if kind == "c":
            return "complex"
        return type(value).__name__
    if isinstance(value, bool):
        return "bool"
    if isinstance(value, int):
        return "int"
    if isinstance(value, float):
        return "float"
    if isinstance(value, complex):
        return "complex"
    if isinstance(value, (fractions.Fraction, decimal.Decimal)):
        return "exact"
    return type(value).__name__
