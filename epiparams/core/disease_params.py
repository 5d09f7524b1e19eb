"""
Disease Severity and Duration Parameters
========================================
Default clinical parameters and the functions that reconcile user
overrides with them.

Two parameter regimes exist:
    * WALKER: the fixed, country-independent calibration of the original
      age-structured model (Walker et al.), kept for backward compatibility
    * DEMOGRAPHIC: current defaults, with the 80+ death probabilities
      adjusted to a country's elderly age composition when a country is given
"""

import logging
from dataclasses import dataclass, fields
from enum import Enum
from numbers import Real
from typing import Dict, Optional, Tuple

import numpy as np

from .exceptions import InvalidArgumentError, NotFoundError
from .population import get_elderly_population
from .reference_data import ReferenceData, get_reference_data

logger = logging.getLogger(__name__)


class SeverityMode(Enum):
    """Which default regime filled the unset severity parameters"""
    DEMOGRAPHIC = "demographic"
    WALKER = "walker"


@dataclass(frozen=True)
class SeverityAssumptions:
    """Fixed assumptions behind the severity defaults and country adjustment"""

    # Infection fatality ratios for 80-84, 85-89 and 90+ (Brazeau et al.)
    elderly_ifr: Tuple[float, float, float] = (0.05659, 0.08862, 0.17370)

    # Share of 80+ hospital deaths occurring in ICU (CHESS data)
    prop_deaths_icu_80plus: float = 0.15

    # Death probabilities without treatment, uniform over age
    prob_non_severe_death_no_treatment: float = 0.6
    prob_severe_death_no_treatment: float = 0.95


DEFAULT_ASSUMPTIONS = SeverityAssumptions()


class _ParameterRecord:
    """Dict-style access for parameter dataclasses"""

    def to_dict(self) -> Dict:
        return {f.name: getattr(self, f.name) for f in fields(self)}

    def __getitem__(self, name: str):
        if name not in {f.name for f in fields(self)}:
            raise KeyError(name)
        return getattr(self, name)


@dataclass(frozen=True)
class SeverityParameters(_ParameterRecord):
    """
    Age-stratified severity probabilities (one value per age group)

    prob_hosp: P(hospitalisation | symptomatic)
    prob_severe: P(severe, ICU-requiring | hospitalised)
    prob_*_death_treatment: P(death | treated)
    prob_*_death_no_treatment: P(death | no treatment available)
    """
    prob_hosp: np.ndarray
    prob_severe: np.ndarray
    prob_non_severe_death_treatment: np.ndarray
    prob_severe_death_treatment: np.ndarray
    prob_non_severe_death_no_treatment: np.ndarray
    prob_severe_death_no_treatment: np.ndarray
    country: Optional[str] = None
    mode: SeverityMode = SeverityMode.DEMOGRAPHIC

    PROBABILITIES = (
        "prob_hosp",
        "prob_severe",
        "prob_non_severe_death_treatment",
        "prob_severe_death_treatment",
        "prob_non_severe_death_no_treatment",
        "prob_severe_death_no_treatment",
    )

    def __post_init__(self):
        for name in self.PROBABILITIES:
            object.__setattr__(self, name, np.array(getattr(self, name), dtype=float))

    @property
    def n_age_groups(self) -> int:
        return len(self.prob_hosp)

    def validate(self):
        """Check every vector is a probability vector of the same length"""
        lengths = {name: len(getattr(self, name)) for name in self.PROBABILITIES}
        if len(set(lengths.values())) != 1:
            raise InvalidArgumentError(f"Severity vectors differ in length: {lengths}")
        for name in self.PROBABILITIES:
            values = getattr(self, name)
            if np.any((values < 0) | (values > 1)):
                raise InvalidArgumentError(f"{name} must lie in [0, 1]")


def _frozen(*values) -> np.ndarray:
    arr = np.array(values, dtype=float)
    arr.setflags(write=False)
    return arr


# Current defaults, 17 age groups (0-4, ..., 75-79, 80+)
DEFAULT_SEVERITY = SeverityParameters(
    prob_hosp=_frozen(
        0.000840528, 0.000489335, 0.001079913, 0.002424631, 0.003239249,
        0.004324928, 0.006304350, 0.009008009, 0.012036202, 0.018045740,
        0.025824065, 0.036685565, 0.052813007, 0.071226064, 0.096112026,
        0.125996278, 0.159247240),
    prob_severe=_frozen(
        0.181354223, 0.181354223, 0.181354223, 0.137454906, 0.121938236,
        0.122775613, 0.136057441, 0.160922182, 0.196987378, 0.242613614,
        0.289407112, 0.319043556, 0.314483035, 0.267135937, 0.189907758,
        0.111225263, 0.050098938),
    prob_non_severe_death_treatment=_frozen(
        0.001083, 0.001083, 0.001083, 0.001651, 0.002515, 0.003831,
        0.005836, 0.008891, 0.013544, 0.020632, 0.031429, 0.047877,
        0.072932, 0.111099, 0.169239, 0.257807, 0.392725),
    prob_severe_death_treatment=_frozen(
        0.1150, 0.1150, 0.1150, 0.1289, 0.1444, 0.1618, 0.1813, 0.2031,
        0.2276, 0.2550, 0.2857, 0.3201, 0.3587, 0.4019, 0.4503, 0.5045,
        0.5653),
    prob_non_severe_death_no_treatment=_frozen(*[0.6] * 17),
    prob_severe_death_no_treatment=_frozen(*[0.95] * 17),
)
for _name in SeverityParameters.PROBABILITIES:
    getattr(DEFAULT_SEVERITY, _name).setflags(write=False)

# Walker et al. calibration
WALKER_PROB_HOSP = _frozen(
    0.000744192, 0.000634166, 0.001171109, 0.002394593, 0.005346437,
    0.010289885, 0.016234604, 0.023349169, 0.028944623, 0.038607042,
    0.057734879, 0.072422135, 0.101602458, 0.116979814, 0.146099064,
    0.176634654, 0.180000000)
WALKER_PROB_SEVERE = _frozen(
    0.05022296, 0.05022296, 0.05022296, 0.05022296, 0.05022296,
    0.05022296, 0.05022296, 0.053214942, 0.05974426, 0.074602879,
    0.103612417, 0.149427991, 0.223777304, 0.306985918,
    0.385779555, 0.461217861, 0.709444444)
WALKER_PROB_NON_SEVERE_DEATH_TREATMENT = _frozen(
    0.0125702, 0.0125702, 0.0125702, 0.0125702,
    0.0125702, 0.0125702, 0.0125702, 0.013361147,
    0.015104687, 0.019164124, 0.027477519, 0.041762108,
    0.068531658, 0.105302319, 0.149305732, 0.20349534, 0.5804312)
WALKER_PROB_SEVERE_DEATH_TREATMENT = 0.5


def _check_flag(value, name: str):
    if not isinstance(value, (bool, np.bool_)):
        raise InvalidArgumentError(f"{name} must be True or False")


def _as_probabilities(value, name: str) -> Optional[np.ndarray]:
    """Coerce an override to a 1-D probability vector (None passes through)"""
    if value is None:
        return None
    try:
        arr = np.atleast_1d(np.array(value, dtype=float))
    except (TypeError, ValueError) as e:
        raise InvalidArgumentError(f"{name} must be numeric") from e
    if arr.ndim != 1:
        raise InvalidArgumentError(f"{name} must be a vector, got shape {arr.shape}")
    if np.any(np.isnan(arr)) or np.any((arr < 0) | (arr > 1)):
        raise InvalidArgumentError(f"{name} must lie in [0, 1]")
    return arr


def _check_lengths(**vectors):
    lengths = {name: len(v) for name, v in vectors.items() if v is not None}
    if len(set(lengths.values())) > 1:
        raise InvalidArgumentError(f"Severity vectors differ in length: {lengths}")


def _bounded(x: float) -> float:
    """Clamp to a probability (inf -> 1, nan -> 0)"""
    return float(np.clip(np.nan_to_num(x, nan=0.0, posinf=1.0, neginf=0.0), 0.0, 1.0))


def elderly_ifr(country: str,
                assumptions: SeverityAssumptions = DEFAULT_ASSUMPTIONS,
                data: Optional[ReferenceData] = None) -> float:
    """
    Infection fatality ratio of a country's 80+ population

    Weights the fixed 80-84, 85-89 and 90+ IFRs by the country's
    population in each of those bins.
    """
    elderly_pop = get_elderly_population(country, data=data)["n"].to_numpy(dtype=float)
    weights = elderly_pop / elderly_pop.sum()
    return float(np.sum(weights * np.asarray(assumptions.elderly_ifr)))


def parse_country_severity(country: Optional[str] = None,
                           prob_hosp=None,
                           prob_severe=None,
                           prob_non_severe_death_treatment=None,
                           prob_severe_death_treatment=None,
                           prob_non_severe_death_no_treatment=None,
                           prob_severe_death_no_treatment=None,
                           walker_params: bool = False,
                           assumptions: SeverityAssumptions = DEFAULT_ASSUMPTIONS,
                           data: Optional[ReferenceData] = None) -> SeverityParameters:
    """
    Build the complete set of severity probabilities

    Unset probabilities are filled, in order of precedence, from:
        1. the Walker et al. curves if walker_params is True
        2. otherwise the current defaults, with the 80+ treated death
           probabilities adjusted to the country's elderly demography
           when a country is given

    Walker parameters win outright: a country passed alongside
    walker_params=True is echoed on the result but changes nothing.

    Args:
        country: Country name used for the demographic adjustment
        prob_*: Optional per-age-group overrides, each in [0, 1]
        walker_params: Use the original Walker et al. parameters
        assumptions: Fixed constants for defaults and the adjustment
        data: Reference data (bundled data if None)

    Returns:
        SeverityParameters
    """
    _check_flag(walker_params, "walker_params")
    if country is not None and not isinstance(country, str):
        raise InvalidArgumentError(f"country must be a string, got {type(country).__name__}")

    prob_hosp = _as_probabilities(prob_hosp, "prob_hosp")
    prob_severe = _as_probabilities(prob_severe, "prob_severe")
    prob_non_severe_death_treatment = _as_probabilities(
        prob_non_severe_death_treatment, "prob_non_severe_death_treatment")
    prob_severe_death_treatment = _as_probabilities(
        prob_severe_death_treatment, "prob_severe_death_treatment")
    prob_non_severe_death_no_treatment = _as_probabilities(
        prob_non_severe_death_no_treatment, "prob_non_severe_death_no_treatment")
    prob_severe_death_no_treatment = _as_probabilities(
        prob_severe_death_no_treatment, "prob_severe_death_no_treatment")

    if walker_params:
        mode = SeverityMode.WALKER
        if country is not None:
            logger.info("walker_params=True: country %s does not adjust severity", country)
        if prob_hosp is None:
            prob_hosp = WALKER_PROB_HOSP.copy()
        if prob_severe is None:
            prob_severe = WALKER_PROB_SEVERE.copy()
        if prob_non_severe_death_treatment is None:
            prob_non_severe_death_treatment = WALKER_PROB_NON_SEVERE_DEATH_TREATMENT.copy()
        if prob_severe_death_treatment is None:
            prob_severe_death_treatment = np.full(len(prob_hosp), WALKER_PROB_SEVERE_DEATH_TREATMENT)
    else:
        mode = SeverityMode.DEMOGRAPHIC
        if prob_hosp is None:
            prob_hosp = DEFAULT_SEVERITY.prob_hosp.copy()
        if prob_severe is None:
            prob_severe = DEFAULT_SEVERITY.prob_severe.copy()

    if prob_non_severe_death_no_treatment is None:
        prob_non_severe_death_no_treatment = np.full(
            len(prob_hosp), assumptions.prob_non_severe_death_no_treatment)
    if prob_severe_death_no_treatment is None:
        prob_severe_death_no_treatment = np.full(
            len(prob_hosp), assumptions.prob_severe_death_no_treatment)

    _check_lengths(
        prob_hosp=prob_hosp,
        prob_severe=prob_severe,
        prob_non_severe_death_treatment=prob_non_severe_death_treatment,
        prob_severe_death_treatment=prob_severe_death_treatment,
        prob_non_severe_death_no_treatment=prob_non_severe_death_no_treatment,
        prob_severe_death_no_treatment=prob_severe_death_no_treatment,
    )

    if mode is SeverityMode.DEMOGRAPHIC and country is not None:
        data = data or get_reference_data()
        if not data.has_country(country):
            raise NotFoundError(f"Country not found: {country}")

        # Adjust the 80+ death probabilities for the country's 80+ composition
        index = len(prob_severe) - 1
        ifr_80plus = elderly_ifr(country, assumptions, data)
        adjusted = []
        with np.errstate(divide="ignore", invalid="ignore"):
            cfr_hosp_80plus = np.float64(ifr_80plus) / prob_hosp[index]

            if prob_severe_death_treatment is None:
                prob_severe_death_treatment = DEFAULT_SEVERITY.prob_severe_death_treatment.copy()
                prob_severe_death_treatment[index] = _bounded(
                    cfr_hosp_80plus * assumptions.prop_deaths_icu_80plus / prob_severe[index])
                adjusted.append("prob_severe_death_treatment")
            if prob_non_severe_death_treatment is None:
                prob_non_severe_death_treatment = DEFAULT_SEVERITY.prob_non_severe_death_treatment.copy()
                prob_non_severe_death_treatment[index] = _bounded(
                    (cfr_hosp_80plus - prob_severe_death_treatment[index] * prob_severe[index])
                    / (1 - prob_severe[index]))
                adjusted.append("prob_non_severe_death_treatment")

        if adjusted:
            logger.info("Adjusted 80+ %s for %s (IFR 80+ = %.4f)",
                        " and ".join(adjusted), country, ifr_80plus)

    # No country (or nothing left to adjust): plain defaults
    if prob_non_severe_death_treatment is None:
        prob_non_severe_death_treatment = DEFAULT_SEVERITY.prob_non_severe_death_treatment.copy()
    if prob_severe_death_treatment is None:
        prob_severe_death_treatment = DEFAULT_SEVERITY.prob_severe_death_treatment.copy()

    params = SeverityParameters(
        prob_hosp=prob_hosp,
        prob_severe=prob_severe,
        prob_non_severe_death_treatment=prob_non_severe_death_treatment,
        prob_severe_death_treatment=prob_severe_death_treatment,
        prob_non_severe_death_no_treatment=prob_non_severe_death_no_treatment,
        prob_severe_death_no_treatment=prob_severe_death_no_treatment,
        country=country,
        mode=mode,
    )
    params.validate()
    return params


# ---------------------------------------------------------------------------
# Durations
# ---------------------------------------------------------------------------

# (duration, time-of-change breakpoints) pairs that may vary over time
TIME_VARYING_DURATIONS = (
    ("dur_get_ox_survive", "tt_dur_get_ox_survive"),
    ("dur_get_ox_die", "tt_dur_get_ox_die"),
    ("dur_get_mv_survive", "tt_dur_get_mv_survive"),
    ("dur_get_mv_die", "tt_dur_get_mv_die"),
)


@dataclass(frozen=True)
class DurationParameters(_ParameterRecord):
    """
    Mean time (days) spent in each clinical state

    ox = oxygen, mv = mechanical ventilation; 'get' and 'not_get' refer to
    whether the treatment was received. tt_* give the times at which the
    matching time-varying duration changes value.
    """
    tt_dur_get_ox_survive: np.ndarray
    dur_get_ox_survive: np.ndarray
    tt_dur_get_ox_die: np.ndarray
    dur_get_ox_die: np.ndarray
    dur_not_get_ox_survive: float
    dur_not_get_ox_die: float
    tt_dur_get_mv_survive: np.ndarray
    dur_get_mv_survive: np.ndarray
    tt_dur_get_mv_die: np.ndarray
    dur_get_mv_die: np.ndarray
    dur_not_get_mv_survive: float
    dur_not_get_mv_die: float
    dur_rec: float
    dur_R: float
    dur_E: float
    dur_IMild: float
    dur_ICase: float

    def validate(self):
        """Each time-varying duration needs one value per breakpoint"""
        for dur, tt in TIME_VARYING_DURATIONS:
            n_dur, n_tt = len(getattr(self, dur)), len(getattr(self, tt))
            if n_dur != n_tt:
                raise InvalidArgumentError(
                    f"{dur} has {n_dur} values but {tt} has {n_tt} breakpoints")


DEFAULT_DURATIONS = DurationParameters(
    tt_dur_get_ox_survive=_frozen(0),
    dur_get_ox_survive=_frozen(9.0),
    tt_dur_get_ox_die=_frozen(0),
    dur_get_ox_die=_frozen(9.0),
    dur_not_get_ox_survive=4.5,
    dur_not_get_ox_die=4.5,
    tt_dur_get_mv_survive=_frozen(0),
    dur_get_mv_survive=_frozen(14.8),
    tt_dur_get_mv_die=_frozen(0),
    dur_get_mv_die=_frozen(11.1),
    dur_not_get_mv_survive=7.4,
    dur_not_get_mv_die=1.0,
    dur_rec=3.0,
    dur_R=np.inf,
    dur_E=4.6,
    dur_IMild=2.1,
    dur_ICase=4.5,
)

# Walker et al. constants
WALKER_DURATIONS = dict(
    dur_get_ox_survive=9.5,
    dur_get_ox_die=7.6,
    dur_get_mv_survive=11.3,
    dur_get_mv_die=10.1,
    dur_not_get_mv_die=1.0,
    dur_rec=3.4,
    dur_R=np.inf,
    dur_E=4.6,
    dur_IMild=2.1,
    dur_ICase=4.5,
)
WALKER_NOT_TREATED_FRACTION = 0.5


def _as_vector(value, name: str) -> Optional[np.ndarray]:
    if value is None:
        return None
    if isinstance(value, (bool, str)):
        raise InvalidArgumentError(f"{name} must be numeric")
    try:
        return np.atleast_1d(np.array(value, dtype=float))
    except (TypeError, ValueError) as e:
        raise InvalidArgumentError(f"{name} must be numeric") from e


def _as_scalar(value, name: str) -> Optional[float]:
    if value is None:
        return None
    if isinstance(value, np.ndarray) and value.size == 1:
        value = value.item()
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidArgumentError(f"{name} must be a number")
    return float(value)


def _per_breakpoint(default: np.ndarray, breakpoints: np.ndarray) -> np.ndarray:
    """Repeat a default duration once per breakpoint"""
    if len(default) == len(breakpoints):
        return default.copy()
    return np.full(len(breakpoints), default[-1])


def parse_durations(dur_get_ox_survive=None,
                    tt_dur_get_ox_survive=None,
                    dur_get_ox_die=None,
                    tt_dur_get_ox_die=None,
                    dur_not_get_ox_survive=None,
                    dur_not_get_ox_die=None,
                    dur_get_mv_survive=None,
                    tt_dur_get_mv_survive=None,
                    dur_get_mv_die=None,
                    tt_dur_get_mv_die=None,
                    dur_not_get_mv_survive=None,
                    dur_not_get_mv_die=None,
                    dur_rec=None,
                    dur_R=None,
                    dur_E=None,
                    dur_IMild=None,
                    dur_ICase=None,
                    walker_params: bool = False,
                    validate: bool = True) -> DurationParameters:
    """
    Build the complete set of clinical durations

    Every unset duration falls back independently, either to the Walker
    et al. constants (walker_params=True) or to DEFAULT_DURATIONS. Under
    Walker parameters the untreated oxygen durations and the untreated
    ventilation survival duration are half their treated counterparts,
    and untreated ventilation death takes 1 day.

    Args:
        dur_*: Optional duration overrides (days)
        tt_dur_*: Optional time-of-change breakpoints for the matching duration
        walker_params: Use the original Walker et al. parameters
        validate: Reject durations whose length differs from their breakpoints

    Returns:
        DurationParameters
    """
    _check_flag(walker_params, "walker_params")
    _check_flag(validate, "validate")

    tt_dur_get_ox_survive = _as_vector(tt_dur_get_ox_survive, "tt_dur_get_ox_survive")
    tt_dur_get_ox_die = _as_vector(tt_dur_get_ox_die, "tt_dur_get_ox_die")
    tt_dur_get_mv_survive = _as_vector(tt_dur_get_mv_survive, "tt_dur_get_mv_survive")
    tt_dur_get_mv_die = _as_vector(tt_dur_get_mv_die, "tt_dur_get_mv_die")
    dur_get_ox_survive = _as_vector(dur_get_ox_survive, "dur_get_ox_survive")
    dur_get_ox_die = _as_vector(dur_get_ox_die, "dur_get_ox_die")
    dur_get_mv_survive = _as_vector(dur_get_mv_survive, "dur_get_mv_survive")
    dur_get_mv_die = _as_vector(dur_get_mv_die, "dur_get_mv_die")

    scalars = {
        "dur_not_get_ox_survive": _as_scalar(dur_not_get_ox_survive, "dur_not_get_ox_survive"),
        "dur_not_get_ox_die": _as_scalar(dur_not_get_ox_die, "dur_not_get_ox_die"),
        "dur_not_get_mv_survive": _as_scalar(dur_not_get_mv_survive, "dur_not_get_mv_survive"),
        "dur_not_get_mv_die": _as_scalar(dur_not_get_mv_die, "dur_not_get_mv_die"),
        "dur_rec": _as_scalar(dur_rec, "dur_rec"),
        "dur_R": _as_scalar(dur_R, "dur_R"),
        "dur_E": _as_scalar(dur_E, "dur_E"),
        "dur_IMild": _as_scalar(dur_IMild, "dur_IMild"),
        "dur_ICase": _as_scalar(dur_ICase, "dur_ICase"),
    }

    if walker_params:
        w = WALKER_DURATIONS
        half = WALKER_NOT_TREATED_FRACTION

        # Constant over time unless breakpoints are given
        if tt_dur_get_ox_survive is None:
            tt_dur_get_ox_survive = np.zeros(1)
        if tt_dur_get_mv_survive is None:
            tt_dur_get_mv_survive = np.zeros(1)
        if tt_dur_get_ox_die is None:
            tt_dur_get_ox_die = np.zeros(1)
        if tt_dur_get_mv_die is None:
            tt_dur_get_mv_die = np.zeros(1)

        if dur_get_ox_survive is None:
            dur_get_ox_survive = np.full(len(tt_dur_get_ox_survive), w["dur_get_ox_survive"])
        if dur_get_ox_die is None:
            dur_get_ox_die = np.full(len(tt_dur_get_ox_die), w["dur_get_ox_die"])
        if scalars["dur_not_get_ox_survive"] is None:
            scalars["dur_not_get_ox_survive"] = float(dur_get_ox_survive[0] * half)
        if scalars["dur_not_get_ox_die"] is None:
            scalars["dur_not_get_ox_die"] = float(dur_get_ox_die[0] * half)
        if dur_get_mv_survive is None:
            dur_get_mv_survive = np.full(len(tt_dur_get_mv_survive), w["dur_get_mv_survive"])
        if dur_get_mv_die is None:
            dur_get_mv_die = np.full(len(tt_dur_get_mv_die), w["dur_get_mv_die"])
        if scalars["dur_not_get_mv_survive"] is None:
            scalars["dur_not_get_mv_survive"] = float(dur_get_mv_survive[0] * half)

        for name in ("dur_not_get_mv_die", "dur_rec", "dur_R", "dur_E", "dur_IMild", "dur_ICase"):
            if scalars[name] is None:
                scalars[name] = float(w[name])
    else:
        d = DEFAULT_DURATIONS
        if tt_dur_get_ox_survive is None:
            tt_dur_get_ox_survive = d.tt_dur_get_ox_survive.copy()
        if tt_dur_get_mv_survive is None:
            tt_dur_get_mv_survive = d.tt_dur_get_mv_survive.copy()
        if tt_dur_get_ox_die is None:
            tt_dur_get_ox_die = d.tt_dur_get_ox_die.copy()
        if tt_dur_get_mv_die is None:
            tt_dur_get_mv_die = d.tt_dur_get_mv_die.copy()
        if dur_get_ox_survive is None:
            dur_get_ox_survive = _per_breakpoint(d.dur_get_ox_survive, tt_dur_get_ox_survive)
        if dur_get_ox_die is None:
            dur_get_ox_die = _per_breakpoint(d.dur_get_ox_die, tt_dur_get_ox_die)
        if dur_get_mv_survive is None:
            dur_get_mv_survive = _per_breakpoint(d.dur_get_mv_survive, tt_dur_get_mv_survive)
        if dur_get_mv_die is None:
            dur_get_mv_die = _per_breakpoint(d.dur_get_mv_die, tt_dur_get_mv_die)

        for name, value in scalars.items():
            if value is None:
                scalars[name] = float(getattr(d, name))

    params = DurationParameters(
        tt_dur_get_ox_survive=tt_dur_get_ox_survive,
        dur_get_ox_survive=dur_get_ox_survive,
        tt_dur_get_ox_die=tt_dur_get_ox_die,
        dur_get_ox_die=dur_get_ox_die,
        tt_dur_get_mv_survive=tt_dur_get_mv_survive,
        dur_get_mv_survive=dur_get_mv_survive,
        tt_dur_get_mv_die=tt_dur_get_mv_die,
        dur_get_mv_die=dur_get_mv_die,
        **scalars,
    )
    if validate:
        params.validate()
    return params


if __name__ == "__main__":
    print("Severity Parameters Test")
    print("=" * 50)

    default = parse_country_severity()
    italy = parse_country_severity(country="Italy")
    for name in ("prob_severe_death_treatment", "prob_non_severe_death_treatment"):
        print(f"{name}[80+]: default={default[name][-1]:.4f}  Italy={italy[name][-1]:.4f}")
    print(f"Italy IFR 80+: {elderly_ifr('Italy'):.4f}")

    walker = parse_durations(walker_params=True)
    print("\nWalker durations:")
    for name, value in walker.to_dict().items():
        print(f"  {name:24s}: {value}")
