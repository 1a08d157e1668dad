"""
Shared Polars expressions for rate statistics.
"""

import polars as pl


def safe_ratio(numerator: pl.Expr, denominator: pl.Expr, *, scale: float = 1.0) -> pl.Expr:
    """
    Divide two columns, yielding 0.0 instead of NaN/inf when the denominator is not positive.

    Qualification thresholds decide later whether a zero is shown at all.
    """
    return (
        pl.when(denominator > 0)
        .then(numerator / denominator * scale)
        .otherwise(pl.lit(0.0))
    )


def clamp_component(expr: pl.Expr, upper: float = 2.375) -> pl.Expr:
    """Clamp a passer rating component to the range [0, upper]."""
    return pl.when(expr < 0).then(0.0).when(expr > upper).then(upper).otherwise(expr)
