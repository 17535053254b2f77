# Requires Python 3.12+
# Uses native type hints: list[x], tuple[x, y], X | None (PEP 585, PEP 604)
from __future__ import annotations

import warnings

import numpy as np
from numpy.typing import ArrayLike

from . import annuity as tvm

__version__ = "0.1.0"


# =============================================================================
# Element-wise evaluation
# =============================================================================
#
# Each *_vector function broadcasts its arguments and applies the scalar
# function to every element, so results match the scalar layer bit for bit.
# No closed-form array formula is used: those reorder the arithmetic.
# =============================================================================

_pmt = np.vectorize(tvm.pmt, otypes=[np.float64])
_fv = np.vectorize(tvm.fv, otypes=[np.float64])
_ipmt = np.vectorize(tvm.ipmt, otypes=[np.float64])
_ppmt = np.vectorize(tvm.ppmt, otypes=[np.float64])
_cumipmt = np.vectorize(tvm.cumipmt, otypes=[np.float64])


def _warn_non_finite(name: str, result: np.ndarray) -> np.ndarray:
    bad = int(np.count_nonzero(~np.isfinite(result)))
    if bad:
        warnings.warn(
            f"{name}: {bad} of {result.size} results are not finite "
            f"(rate of -1 or growth factor overflow)",
            RuntimeWarning,
            stacklevel=3,
        )
    return result


def pmt_vector(
        rate: ArrayLike,
        nper: ArrayLike,
        pv: ArrayLike,
        fv: ArrayLike = 0,
        due: ArrayLike = False
) -> np.ndarray:
    """
    Vectorized periodic payment. See annuity.pmt for details.

    Args:
        rate: Periodic interest rates as decimal
        nper: Total numbers of periods
        pv: Present values
        fv: Future values
        due: Payment timing flags (True = start of period)

    Returns:
        Array of payments, broadcast shape of the inputs.
        Emits RuntimeWarning if any payment is inf/nan.

    Example:
        >>> pmt_vector([0.0, 0.3], 36, 100_000)
        array([ -2777.77777778, -30002.37243824])
    """
    return _warn_non_finite("pmt", _pmt(rate, nper, pv, fv, due))


def fv_vector(
        rate: ArrayLike,
        nper: ArrayLike,
        pmt: ArrayLike,
        pv: ArrayLike = 0,
        due: ArrayLike = False
) -> np.ndarray:
    """Vectorized future value. See annuity.fv for details."""
    return _warn_non_finite("fv", _fv(rate, nper, pmt, pv, due))


def ipmt_vector(
        rate: ArrayLike,
        per: ArrayLike,
        nper: ArrayLike,
        pv: ArrayLike,
        fv: ArrayLike = 0,
        due: ArrayLike = False
) -> np.ndarray:
    """
    Vectorized interest component. See annuity.ipmt for details.

    Passing an array of `per` values gives the interest column for those
    periods; the caller chooses which periods to evaluate.
    """
    return _warn_non_finite("ipmt", _ipmt(rate, per, nper, pv, fv, due))


def ppmt_vector(
        rate: ArrayLike,
        per: ArrayLike,
        nper: ArrayLike,
        pv: ArrayLike,
        fv: ArrayLike = 0,
        due: ArrayLike = False
) -> np.ndarray:
    """Vectorized principal component. See annuity.ppmt for details."""
    return _warn_non_finite("ppmt", _ppmt(rate, per, nper, pv, fv, due))


def cumipmt_vector(
        rate: ArrayLike,
        nper: ArrayLike,
        pv: ArrayLike,
        start: ArrayLike,
        end: ArrayLike,
        due: ArrayLike = False
) -> np.ndarray:
    """Vectorized cumulative interest. See annuity.cumipmt for details."""
    return _warn_non_finite("cumipmt", _cumipmt(rate, nper, pv, start, end, due))


# =============================================================================
# Comparison
# =============================================================================

def compare_arrays(expected: np.ndarray, actual: np.ndarray,
                   rtol: float = 1e-9, atol: float = 1e-10) -> tuple[bool, float, int]:
    """Compare two result arrays, truncated to the shorter length."""
    expected = np.asarray(expected, dtype=np.float64).ravel()
    actual = np.asarray(actual, dtype=np.float64).ravel()
    min_len = min(len(expected), len(actual))
    ref = expected[:min_len]
    test = actual[:min_len]
    with np.errstate(divide='ignore', invalid='ignore'):
        rel_diff = np.abs(ref - test) / np.maximum(np.abs(ref), atol)
        rel_diff = np.where(np.isfinite(rel_diff), rel_diff, 0.0)
    max_rel_diff = float(np.max(rel_diff)) if min_len else 0.0
    worst_index = int(np.argmax(rel_diff)) if min_len else 0
    all_close = bool(np.allclose(ref, test, rtol=rtol, atol=atol))
    return all_close, max_rel_diff, worst_index
