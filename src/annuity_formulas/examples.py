"""
Annuity Formulas - Reference Scenarios

**Version**: 0.1.0
**Status**: Active

Reference inputs and outputs for the five spreadsheet annuity functions.
Expected values are IEEE-754 doubles and must be reproduced exactly, not
approximately: they pin the guard clauses, the operation order and the
annuity-due conventions of each function.

Scenario ids follow "<FUNCTION>-<case>", e.g. "IPMT-R060-DUE" is IPMT at a
60% periodic rate with payments at the start of the period.

Loans used throughout:
  - 100,000 over 36 periods (PMT)
  - 800,000 over 36 periods (IPMT, PPMT, CUMIPMT)
  - 10,000 per period over 12 periods (FV)
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Tuple

from annuity_formulas import annuity


FUNCTIONS: Dict[str, Callable[..., float]] = {
    "pmt": annuity.pmt,
    "fv": annuity.fv,
    "ipmt": annuity.ipmt,
    "ppmt": annuity.ppmt,
    "cumipmt": annuity.cumipmt,
}


@dataclass(frozen=True)
class AnnuityExample:
    """One reference evaluation: function, keyword arguments, expected double."""
    id: str
    description: str
    function: str                        # Key into FUNCTIONS
    kwargs: Dict[str, Any] = field(default_factory=dict)
    expected: float = 0.0

    def evaluate(self) -> float:
        """Run the scalar function on this example's arguments."""
        return FUNCTIONS[self.function](**self.kwargs)

    @property
    def due(self) -> bool:
        return bool(self.kwargs.get("due", False))


# =============================================================================
# PMT
# =============================================================================

PMT_EXAMPLES = (
    AnnuityExample(
        id="PMT-NPER0",
        description="No periods: no payment.",
        function="pmt",
        kwargs=dict(rate=0.3, nper=0, pv=100_000, fv=0, due=False),
        expected=0.0,
    ),
    AnnuityExample(
        id="PMT-R000",
        description="Zero rate: straight-line amortization of 100,000 over 36 periods.",
        function="pmt",
        kwargs=dict(rate=0.0, nper=36, pv=100_000, fv=0, due=False),
        expected=-2_777.777777777778,
    ),
    AnnuityExample(
        id="PMT-R000-DUE",
        description="Zero rate ignores payment timing.",
        function="pmt",
        kwargs=dict(rate=0.0, nper=36, pv=100_000, fv=0, due=True),
        expected=-2_777.777777777778,
    ),
    AnnuityExample(
        id="PMT-R000-FV",
        description="Zero rate with a 1,000 balloon.",
        function="pmt",
        kwargs=dict(rate=0.0, nper=36, pv=100_000, fv=1_000, due=False),
        expected=-2_805.5555555555557,
    ),
    AnnuityExample(
        id="PMT-R000-FV-DUE",
        description="Zero rate with a 1,000 balloon, payments in advance.",
        function="pmt",
        kwargs=dict(rate=0.0, nper=36, pv=100_000, fv=1_000, due=True),
        expected=-2_805.5555555555557,
    ),
    AnnuityExample(
        id="PMT-R030",
        description="30% periodic rate, ordinary annuity.",
        function="pmt",
        kwargs=dict(rate=0.3, nper=36, pv=100_000, fv=0, due=False),
        expected=-30_002.37243823623,
    ),
    AnnuityExample(
        id="PMT-R030-DUE",
        description="30% periodic rate, annuity due.",
        function="pmt",
        kwargs=dict(rate=0.3, nper=36, pv=100_000, fv=0, due=True),
        expected=-23_078.748029412483,
    ),
    AnnuityExample(
        id="PMT-R030-FV",
        description="30% periodic rate with a 1,000 balloon.",
        function="pmt",
        kwargs=dict(rate=0.3, nper=36, pv=100_000, fv=1_000, due=False),
        expected=-30_002.396162618596,
    ),
    AnnuityExample(
        id="PMT-R030-FV-DUE",
        description="30% periodic rate with a 1,000 balloon, annuity due.",
        function="pmt",
        kwargs=dict(rate=0.3, nper=36, pv=100_000, fv=1_000, due=True),
        expected=-23_078.76627893738,
    ),
)


# =============================================================================
# FV
# =============================================================================

FV_EXAMPLES = (
    AnnuityExample(
        id="FV-R000",
        description="Zero rate: twelve payments of 10,000 summed.",
        function="fv",
        kwargs=dict(rate=0.0, nper=12, pmt=10_000.0, pv=0, due=False),
        expected=-120_000.0,
    ),
    AnnuityExample(
        id="FV-R000-DUE",
        description="Zero rate ignores payment timing.",
        function="fv",
        kwargs=dict(rate=0.0, nper=12, pmt=10_000.0, pv=0, due=True),
        expected=-120_000.0,
    ),
    AnnuityExample(
        id="FV-R000-PV",
        description="Zero rate with 1,000 present value.",
        function="fv",
        kwargs=dict(rate=0.0, nper=12, pmt=10_000.0, pv=1_000, due=False),
        expected=-121_000.0,
    ),
    AnnuityExample(
        id="FV-R000-PV-DUE",
        description="Zero rate with 1,000 present value, payments in advance.",
        function="fv",
        kwargs=dict(rate=0.0, nper=12, pmt=10_000.0, pv=1_000, due=True),
        expected=-121_000.0,
    ),
    AnnuityExample(
        id="FV-R010",
        description="10% periodic rate, ordinary annuity.",
        function="fv",
        kwargs=dict(rate=0.1, nper=12, pmt=10_000.0, pv=0, due=False),
        expected=-213_842.83767210032,
    ),
    AnnuityExample(
        id="FV-R010-DUE",
        description="10% periodic rate, annuity due.",
        function="fv",
        kwargs=dict(rate=0.1, nper=12, pmt=10_000.0, pv=0, due=True),
        expected=-235_227.12143931031,
    ),
    AnnuityExample(
        id="FV-R010-PV",
        description="10% periodic rate with 1,000 present value.",
        function="fv",
        kwargs=dict(rate=0.1, nper=12, pmt=10_000.0, pv=1_000, due=False),
        expected=-216_981.26604882133,
    ),
    AnnuityExample(
        id="FV-R010-PV-DUE",
        description="10% periodic rate with 1,000 present value, annuity due.",
        function="fv",
        kwargs=dict(rate=0.1, nper=12, pmt=10_000.0, pv=1_000, due=True),
        expected=-238_365.54981603133,
    ),
)


# =============================================================================
# IPMT
# =============================================================================
#
# Rates of 10%, 50% and 60% sit below, on and above the direct-power
# threshold (|rate| > 0.5). Periods past the second separate the direct
# power from the log-exponential form, so both factors are pinned.
# =============================================================================

IPMT_EXAMPLES = (
    AnnuityExample(
        id="IPMT-PER0",
        description="Period zero is outside the schedule.",
        function="ipmt",
        kwargs=dict(rate=0.3, per=0, nper=36, pv=100_000, fv=0, due=False),
        expected=0.0,
    ),
    AnnuityExample(
        id="IPMT-NPER0",
        description="No periods.",
        function="ipmt",
        kwargs=dict(rate=0.3, per=3, nper=0, pv=100_000, fv=0, due=False),
        expected=0.0,
    ),
    AnnuityExample(
        id="IPMT-RNEG",
        description="Negative rates are rejected.",
        function="ipmt",
        kwargs=dict(rate=-0.1, per=3, nper=36, pv=100_000, fv=0, due=False),
        expected=0.0,
    ),
    AnnuityExample(
        id="IPMT-R010",
        description="Second-period interest on 800,000 at 10%.",
        function="ipmt",
        kwargs=dict(rate=0.1, per=2, nper=36, pv=800_000, fv=0, due=False),
        expected=-79_732.55489453014,
    ),
    AnnuityExample(
        id="IPMT-R010-DUE",
        description="Second-period interest at 10%, annuity due.",
        function="ipmt",
        kwargs=dict(rate=0.1, per=2, nper=36, pv=800_000, fv=0, due=True),
        expected=-72_484.14081320922,
    ),
    AnnuityExample(
        id="IPMT-R010-FV",
        description="Second-period interest at 10% with a 1,000 balloon.",
        function="ipmt",
        kwargs=dict(rate=0.1, per=2, nper=36, pv=800_000, fv=1_000, due=False),
        expected=-79_732.22058814831,
    ),
    AnnuityExample(
        id="IPMT-R010-FV-DUE",
        description="Second-period interest at 10% with a 1,000 balloon, annuity due.",
        function="ipmt",
        kwargs=dict(rate=0.1, per=2, nper=36, pv=800_000, fv=1_000, due=True),
        expected=-72_483.83689831664,
    ),
    AnnuityExample(
        id="IPMT-R060",
        description="Second-period interest at 60% (direct power branch).",
        function="ipmt",
        kwargs=dict(rate=0.6, per=2, nper=36, pv=800_000, fv=0, due=False),
        expected=-479_999.9870856327,
    ),
    AnnuityExample(
        id="IPMT-R060-DUE",
        description="Second-period interest at 60%, annuity due.",
        function="ipmt",
        kwargs=dict(rate=0.6, per=2, nper=36, pv=800_000, fv=0, due=True),
        expected=-299_999.99192852044,
    ),
    AnnuityExample(
        id="IPMT-R060-FV",
        description="Second-period interest at 60% with a 1,000 balloon.",
        function="ipmt",
        kwargs=dict(rate=0.6, per=2, nper=36, pv=800_000, fv=1_000, due=False),
        expected=-479_999.9870694897,
    ),
    AnnuityExample(
        id="IPMT-R060-FV-DUE",
        description="Second-period interest at 60% with a 1,000 balloon, annuity due.",
        function="ipmt",
        kwargs=dict(rate=0.6, per=2, nper=36, pv=800_000, fv=1_000, due=True),
        expected=-299_999.9919184311,
    ),
    AnnuityExample(
        id="IPMT-R050-PER6",
        description="Sixth-period interest at exactly 50% (log-exponential branch).",
        function="ipmt",
        kwargs=dict(rate=0.5, per=6, nper=36, pv=800_000, fv=0, due=False),
        expected=-399_998.7924438305,
    ),
    AnnuityExample(
        id="IPMT-R060-PER8",
        description="Eighth-period interest at 60%: direct power n, log-exponential m.",
        function="ipmt",
        kwargs=dict(rate=0.6, per=8, nper=36, pv=800_000, fv=0, due=False),
        expected=-479_999.44374493137,
    ),
    AnnuityExample(
        id="IPMT-R060-PER10",
        description="Tenth-period interest at 60%: direct power n, log-exponential m.",
        function="ipmt",
        kwargs=dict(rate=0.6, per=10, nper=36, pv=800_000, fv=0, due=False),
        expected=-479_998.5424096808,
    ),
)


# =============================================================================
# PPMT
# =============================================================================

PPMT_EXAMPLES = (
    AnnuityExample(
        id="PPMT-PER0",
        description="Period zero is outside 1..nper.",
        function="ppmt",
        kwargs=dict(rate=0.1, per=0, nper=10, pv=800_000, fv=0, due=False),
        expected=0.0,
    ),
    AnnuityExample(
        id="PPMT-PERNEG",
        description="Negative period is outside 1..nper.",
        function="ppmt",
        kwargs=dict(rate=0.1, per=-1, nper=10, pv=800_000, fv=0, due=False),
        expected=0.0,
    ),
    AnnuityExample(
        id="PPMT-PER11",
        description="Period just past the last payment.",
        function="ppmt",
        kwargs=dict(rate=0.1, per=11, nper=10, pv=800_000, fv=0, due=False),
        expected=0.0,
    ),
    AnnuityExample(
        id="PPMT-PER15",
        description="Period well past the last payment.",
        function="ppmt",
        kwargs=dict(rate=0.1, per=15, nper=10, pv=800_000, fv=0, due=False),
        expected=0.0,
    ),
    AnnuityExample(
        id="PPMT-R010",
        description="Twelfth-period principal on 800,000 at 10%.",
        function="ppmt",
        kwargs=dict(rate=0.1, per=12, nper=36, pv=800_000, fv=0, due=False),
        expected=-7_630.520983834242,
    ),
    AnnuityExample(
        id="PPMT-R010-FV",
        description="Twelfth-period principal at 10% with a 1,000 balloon.",
        function="ppmt",
        kwargs=dict(rate=0.1, per=12, nper=36, pv=800_000, fv=1_000, due=False),
        expected=-7_640.059135064032,
    ),
    AnnuityExample(
        id="PPMT-R010-DUE",
        description="Twelfth-period principal at 10%, annuity due.",
        function="ppmt",
        kwargs=dict(rate=0.1, per=12, nper=36, pv=800_000, fv=0, due=True),
        expected=-6_936.837258031126,
    ),
    AnnuityExample(
        id="PPMT-R010-FV-DUE",
        description="Twelfth-period principal at 10% with a 1,000 balloon, annuity due.",
        function="ppmt",
        kwargs=dict(rate=0.1, per=12, nper=36, pv=800_000, fv=1_000, due=True),
        expected=-6_945.50830460366,
    ),
)


# =============================================================================
# CUMIPMT
# =============================================================================

CUMIPMT_EXAMPLES = (
    AnnuityExample(
        id="CUMIPMT-R000",
        description="Zero rate is rejected.",
        function="cumipmt",
        kwargs=dict(rate=0.0, nper=36, pv=800_000, start=6, end=12, due=False),
        expected=0.0,
    ),
    AnnuityExample(
        id="CUMIPMT-RNEG1",
        description="Rate of -100% is rejected before any division.",
        function="cumipmt",
        kwargs=dict(rate=-1.0, nper=36, pv=800_000, start=6, end=12, due=False),
        expected=0.0,
    ),
    AnnuityExample(
        id="CUMIPMT-NPER0",
        description="No periods.",
        function="cumipmt",
        kwargs=dict(rate=0.1, nper=0, pv=800_000, start=6, end=12, due=False),
        expected=0.0,
    ),
    AnnuityExample(
        id="CUMIPMT-NPERNEG",
        description="Negative number of periods.",
        function="cumipmt",
        kwargs=dict(rate=0.1, nper=-1, pv=800_000, start=6, end=12, due=False),
        expected=0.0,
    ),
    AnnuityExample(
        id="CUMIPMT-PV0",
        description="Zero present value is rejected.",
        function="cumipmt",
        kwargs=dict(rate=0.1, nper=36, pv=0, start=6, end=12, due=False),
        expected=0.0,
    ),
    AnnuityExample(
        id="CUMIPMT-PVNEG",
        description="Negative present value is rejected.",
        function="cumipmt",
        kwargs=dict(rate=0.1, nper=36, pv=-1, start=6, end=12, due=False),
        expected=0.0,
    ),
    AnnuityExample(
        id="CUMIPMT-START0",
        description="Range starting at period zero.",
        function="cumipmt",
        kwargs=dict(rate=0.1, nper=36, pv=800_000, start=0, end=12, due=False),
        expected=0.0,
    ),
    AnnuityExample(
        id="CUMIPMT-END0",
        description="Range ending at period zero.",
        function="cumipmt",
        kwargs=dict(rate=0.1, nper=36, pv=800_000, start=1, end=0, due=False),
        expected=0.0,
    ),
    AnnuityExample(
        id="CUMIPMT-REVERSED",
        description="Range with start after end.",
        function="cumipmt",
        kwargs=dict(rate=0.1, nper=36, pv=800_000, start=10, end=9, due=False),
        expected=0.0,
    ),
    AnnuityExample(
        id="CUMIPMT-6-12-DUE",
        description="Interest over periods 6..12 on 800,000 at 10%, annuity due.",
        function="cumipmt",
        kwargs=dict(rate=0.1, nper=36, pv=800_000, start=6, end=12, due=True),
        expected=-488_961.5711288557,
    ),
    AnnuityExample(
        id="CUMIPMT-6-12",
        description="Interest over periods 6..12 on 800,000 at 10%.",
        function="cumipmt",
        kwargs=dict(rate=0.1, nper=36, pv=800_000, start=6, end=12, due=False),
        expected=-537_857.7282417413,
    ),
    AnnuityExample(
        id="CUMIPMT-1-12-DUE",
        description="First-year interest on 800,000 at 10%, annuity due.",
        function="cumipmt",
        kwargs=dict(rate=0.1, nper=36, pv=800_000, start=1, end=12, due=True),
        expected=-849_911.0839829034,
    ),
    AnnuityExample(
        id="CUMIPMT-1-12",
        description="First-year interest on 800,000 at 10% (seeded by -PV).",
        function="cumipmt",
        kwargs=dict(rate=0.1, nper=36, pv=800_000, start=1, end=12, due=False),
        expected=-934_902.1923811939,
    ),
)


# =============================================================================
# REGISTRY
# =============================================================================

ANNUITY_EXAMPLES: Tuple[AnnuityExample, ...] = (
    PMT_EXAMPLES + FV_EXAMPLES + IPMT_EXAMPLES + PPMT_EXAMPLES + CUMIPMT_EXAMPLES
)

EXAMPLES_BY_FUNCTION: Dict[str, Tuple[AnnuityExample, ...]] = {
    name: tuple(ex for ex in ANNUITY_EXAMPLES if ex.function == name)
    for name in FUNCTIONS
}

EXAMPLES_BY_ID: Dict[str, AnnuityExample] = {ex.id: ex for ex in ANNUITY_EXAMPLES}
