# Requires Python 3.12+
"""
Annuity Formulas — spreadsheet-compatible PMT, IPMT, FV, PPMT and CUMIPMT.

Outputs reproduce the reference spreadsheet values bit for bit.
"""

from __future__ import annotations

__version__ = "0.1.0"

# Scalar functions
from annuity_formulas.annuity import (
    pmt,
    fv,
    ipmt,
    ppmt,
    cumipmt,
)

# Vectorized variants
from annuity_formulas.vectorized import (
    pmt_vector,
    fv_vector,
    ipmt_vector,
    ppmt_vector,
    cumipmt_vector,
    compare_arrays,
)

# Reference scenarios
from annuity_formulas.examples import (
    AnnuityExample,
    ANNUITY_EXAMPLES,
    EXAMPLES_BY_FUNCTION,
    EXAMPLES_BY_ID,
)

__all__ = [
    "__version__",
    # Scalar functions
    "pmt",
    "fv",
    "ipmt",
    "ppmt",
    "cumipmt",
    # Vectorized variants
    "pmt_vector",
    "fv_vector",
    "ipmt_vector",
    "ppmt_vector",
    "cumipmt_vector",
    "compare_arrays",
    # Examples
    "AnnuityExample",
    "ANNUITY_EXAMPLES",
    "EXAMPLES_BY_FUNCTION",
    "EXAMPLES_BY_ID",
]
