from __future__ import annotations

import math
import numbers
from decimal import ROUND_HALF_UP, Context, Decimal

import sympy as sp

from parabola_fit.models import Coefficients

# Integer digits of the largest finite double.
_MAX_DOUBLE_DIGITS: int = 310


def _round_half_up(v: float, decimals: int) -> str:
    """Fixed-point text of *v* with ties on the exact binary value rounded away from zero."""
    exponent = Decimal(1).scaleb(-decimals)
    context = Context(prec=_MAX_DOUBLE_DIGITS + decimals)
    return format(Decimal(v).quantize(exponent, rounding=ROUND_HALF_UP, context=context), "f")


def format_number(value: object, decimals: int = 3) -> str:
    """Round to *decimals* places and drop trailing zeros.

    ``2.500 -> "2.5"``, ``2.000 -> "2"``, ``0.0625 -> "0.063"``. Anything
    that is not a real number, and NaN, renders as ``"0"``.
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        return "0"
    v = float(value)
    if math.isnan(v):
        return "0"
    if math.isinf(v):
        return "inf" if v > 0 else "-inf"
    text = _round_half_up(v, max(0, int(decimals)))
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text == "-0":
        return "0"
    return text


def _signed_term(value: float, precision: int, unit_symbol: str = "") -> str:
    """`` + 2x`` / `` - x`` / `` - 3``: operator, magnitude, symbol."""
    op = " + " if value > 0 else " - "
    magnitude = abs(value)
    if unit_symbol and magnitude == 1.0:
        return op + unit_symbol
    return op + format_number(magnitude, precision) + unit_symbol


def format_quadratic(coefficients: Coefficients, precision: int = 3) -> str:
    a, b, c = coefficients.as_tuple()

    if abs(a) == 1.0:
        lead = "-x²" if a < 0 else "x²"
    else:
        lead = format_number(a, precision) + "x²"

    equation = "y = " + lead
    if b != 0:
        equation += _signed_term(b, precision, "x")
    if c != 0:
        equation += _signed_term(c, precision)
    return equation


def format_tangent(x0: float, y0: float, slope: float, precision: int = 3) -> str:
    """Slope-intercept form of the line through (x0, y0) with *slope*."""
    intercept = y0 - slope * x0

    if slope == 0:
        lead = "0"
    elif abs(slope) == 1.0:
        lead = "-x" if slope < 0 else "x"
    else:
        lead = format_number(slope, precision) + "x"

    equation = "y = " + lead
    if intercept != 0:
        equation += _signed_term(intercept, precision)
    return equation


# ===========================================================================
# LaTeX
# ===========================================================================

def _n(v: float, approx: bool, decimals: int) -> sp.Expr:
    """Approx mode -> rounded sp.Float, exact mode -> sp.Rational (denominator <= 1000)."""
    if approx:
        return sp.Float(_round_half_up(v, decimals))
    return sp.Rational(v).limit_denominator(1000)


def quadratic_to_latex(coefficients: Coefficients, approx: bool = True,
                       decimals: int = 3) -> str:
    x = sp.Symbol("x")
    decimals = max(0, min(10, int(decimals)))
    a, b, c = (_n(v, approx, decimals) for v in coefficients.as_tuple())
    expr = a * x ** 2 + b * x + c
    return f"$y = {sp.latex(expr)}$"
