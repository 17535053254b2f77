# Requires Python 3.12+
# Uses native type hints: list[x], tuple[x, y], X | None (PEP 585, PEP 604)
from __future__ import annotations

import math

import numpy as np

__version__ = "0.1.0"

# Above this |rate| the IPMT growth factor is taken as a direct power.
DIRECT_POWER_RATE_THRESHOLD: float = 0.5


# =============================================================================
# Floating-point helpers
# =============================================================================
#
# Arithmetic runs on np.float64 so that division by zero and overflow give
# inf/nan (IEEE-754) instead of ZeroDivisionError/OverflowError. exp and ln
# go through math (platform libm), which the reference values were produced
# with; numpy's SIMD exp/log may differ in the last bit.
# =============================================================================

def _exp(x: np.float64) -> np.float64:
    try:
        return np.float64(math.exp(x))
    except OverflowError:
        return np.float64(np.inf)


def _log(x: np.float64) -> np.float64:
    if x == 0.0:
        return np.float64(-np.inf)
    if x < 0.0:
        return np.float64(np.nan)
    return np.float64(math.log(x))


# =============================================================================
# Leaf functions: PMT and FV
# =============================================================================

def pmt(rate: float, nper: int, pv: int, fv: int = 0, due: bool = False) -> float:
    """
    Calculate the constant periodic payment that amortizes `pv` to `fv`.

    Spreadsheet equivalent: PMT(rate, nper, pv, fv, type)

    Formula (rate != 0):
        PVIF    = (1 + r)^n
        PAYMENT = r / (PVIF - 1) × -(PV × PVIF + FV)

    For an annuity due the payment is discounted by one period:
        PAYMENT_due = PAYMENT / (1 + r)

    With a zero rate there is no compounding and the balance is spread
    linearly:
        PAYMENT = -(PV + FV) / n

    Args:
        rate: Periodic interest rate as decimal (e.g., 0.1 for 10%)
        nper: Total number of periods
        pv: Present value (positive = amount received now)
        fv: Future value (balance remaining after the last payment), default 0
        due: False = payment at end of period, True = payment at start

    Returns:
        Periodic payment (negative = money paid out). 0.0 when nper is zero.

    Example:
        >>> pmt(0.0, 36, 100_000, 0)
        -2777.777777777778
    """
    if nper == 0:
        return 0.0

    with np.errstate(divide='ignore', over='ignore', invalid='ignore'):
        rate = np.float64(rate)
        nper_f = np.float64(nper)
        pv_f = np.float64(pv)
        fv_f = np.float64(fv)

        if rate == 0.0:
            return float(-(pv_f + fv_f) / nper_f)

        pvif = (1.0 + rate) ** nper_f
        payment = (rate / (pvif - 1.0)) * -(pv_f * pvif + fv_f)

        if not due:
            return float(payment)
        return float(payment / (1.0 + rate))


def fv(rate: float, nper: int, pmt: float, pv: int = 0, due: bool = False) -> float:
    """
    Calculate the future value of `pv` plus `nper` equal payments of `pmt`.

    Spreadsheet equivalent: FV(rate, nper, pmt, pv, type)

    Formula (rate != 0):
        TERM = (1 + r)^n
        FV   = -(PV × TERM + PMT × (TERM - 1) / r)               (ordinary)
        FV   = -(PV × TERM + PMT × (1 + r) × (TERM - 1) / r)     (due)

    Zero rate:
        FV = -(PV + PMT × n)

    `nper` may be negative; the growth factor is then a discount factor.

    Args:
        rate: Periodic interest rate as decimal
        nper: Number of periods
        pmt: Payment made each period
        pv: Present value, default 0
        due: False = payment at end of period, True = payment at start

    Returns:
        Future value of the cash-flow stream
    """
    with np.errstate(divide='ignore', over='ignore', invalid='ignore'):
        rate = np.float64(rate)
        nper_f = np.float64(nper)
        pmt_f = np.float64(pmt)
        pv_f = np.float64(pv)

        if rate == 0.0:
            return float(-(pv_f + pmt_f * nper_f))

        term = (1.0 + rate) ** nper_f
        if due:
            return float(-(pv_f * term + (pmt_f * (1.0 + rate) * (term - 1.0)) / rate))
        return float(-(pv_f * term + (pmt_f * (term - 1.0)) / rate))


# =============================================================================
# Payment components: IPMT and PPMT
# =============================================================================

def ipmt(rate: float, per: int, nper: int, pv: int, fv: int, due: bool = False) -> float:
    """
    Calculate the interest portion of the payment due at period `per`.

    Spreadsheet equivalent: IPMT(rate, per, nper, pv, fv, type)

    Formula:
        k        = per - 1
        N        = (1 + r)^k                    if |r| > 0.5
                 = exp(k × ln(1 + r))           otherwise
        M        = exp(k × ln(1 + r)) - 1
        INTEREST = -(PV × N × r + PMT_ord × M)

    where PMT_ord is the ordinary-annuity payment pmt(rate, nper, pv, fv, False).
    The annuity-due flag is applied only at the end:
        INTEREST_due = INTEREST / (1 + r)

    Numerical Note:
    ---------------
    N switches to a direct power for large rates while M always uses the
    log-exponential form. The two forms round differently; the mix is what
    reproduces the reference outputs exactly, so neither side may be
    rewritten in terms of the other.

    Args:
        rate: Periodic interest rate as decimal. Negative rates return 0.0;
              a zero rate is accepted.
        per: 1-based period index
        nper: Total number of periods
        pv: Present value
        fv: Future value
        due: False = payment at end of period, True = payment at start

    Returns:
        Interest component of the period's payment. 0.0 when nper or per is
        zero, or when rate is negative.

    Example:
        >>> ipmt(0.1, 2, 36, 800_000, 0)
        -79732.55489453014
    """
    if nper == 0:
        return 0.0
    if per == 0:
        return 0.0
    if rate < 0.0:
        return 0.0

    base_pmt = np.float64(pmt(rate, nper, pv, fv, False))

    with np.errstate(divide='ignore', over='ignore', invalid='ignore'):
        rate = np.float64(rate)
        k = np.float64(per - 1)

        if abs(rate) > DIRECT_POWER_RATE_THRESHOLD:
            n = (1.0 + rate) ** k
        else:
            n = _exp(k * _log(1.0 + rate))

        m = _exp(k * _log(1.0 + rate)) - 1.0

        interest = -(np.float64(pv) * n * rate + base_pmt * m)
        if not due:
            return float(interest)
        return float(interest / (1.0 + rate))


def ppmt(rate: float, per: int, nper: int, pv: int, fv: int, due: bool = False) -> float:
    """
    Calculate the principal portion of the payment due at period `per`.

    Spreadsheet equivalent: PPMT(rate, per, nper, pv, fv, type)

    Formula:
        PRINCIPAL = PMT - IPMT

    Returns 0.0 when `per` lies outside 1..nper.
    """
    if per < 1 or per > nper:
        return 0.0
    return pmt(rate, nper, pv, fv, due) - ipmt(rate, per, nper, pv, fv, due)


# =============================================================================
# Cumulative interest: CUMIPMT
# =============================================================================

def cumipmt(rate: float, nper: int, pv: int, start: int, end: int, due: bool = False) -> float:
    """
    Calculate the cumulative interest paid over periods `start`..`end` inclusive.

    Spreadsheet equivalent: CUMIPMT(rate, nper, pv, start_period, end_period, type)

    The interest of each period is r times the balance carried into it. The
    balance is the negated FV of the loan after the periods already paid, so
    the sum is accumulated in balance terms and scaled by r once at the end:

        Ordinary:  CUMINT = r × Σ FV(r, i - 1, PMT, PV)
        Due:       CUMINT = r × Σ [FV_due(r, i - 2, PMT, PV) - PMT]

    with PMT = pmt(rate, nper, pv, 0, due). For an ordinary annuity starting
    at period 1, the first balance is PV itself and seeds the sum as -PV.

    Guard Clauses:
    --------------
    Returns 0.0 when rate <= 0, nper <= 0, pv <= 0, start < 1, end < 1 or
    start > end. Unlike ipmt, a zero rate is rejected here, as is a
    non-positive present value.

    Args:
        rate: Periodic interest rate as decimal (must be > 0)
        nper: Total number of periods (must be > 0)
        pv: Present value (must be > 0)
        start: First period of the range (1-based)
        end: Last period of the range (inclusive)
        due: False = payment at end of period, True = payment at start

    Returns:
        Total interest over the range (negative = interest paid)

    Example:
        >>> cumipmt(0.1, 36, 800_000, 1, 12)
        -934902.1923811939
    """
    if rate <= 0.0 or nper <= 0 or pv <= 0:
        return 0.0
    if start < 1 or end < 1 or start > end:
        return 0.0

    base_pmt = pmt(rate, nper, pv, 0, due)
    interest = 0.0
    first = start
    if start == 1 and not due:
        interest = -float(pv)
        first = start + 1

    for i in range(first, end + 1):
        if due:
            interest += fv(rate, i - 2, base_pmt, pv, True) - base_pmt
        else:
            interest += fv(rate, i - 1, base_pmt, pv, False)

    return float(interest * rate)
