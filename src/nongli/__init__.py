"""nongli public API.

Keep this surface small: users should mostly interact with the calendar
types and the functions re-exported here.
"""

# Initialize registry on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    list_kernels,
    register_kernel,
    use_kernel,
    active_kernel,
    solar_to_lunar,
    lunar_to_solar,
    terms_of_year,
    lunar_hour,
    eight_char,
    child_limit,
)
from .core.errors import (
    NongliError,
    InvalidDate,
    InvalidLunarMonth,
    InvalidLeapMonth,
    InvalidTimeField,
    InvalidName,
    KernelUnavailableError,
    KernelRangeError,
)
from .core.types import Gender, YinYang
from .jd import JulianDay, Week
from .term import SolarTerm, SolarTermDay
from .solar import SolarYear, SolarHalfYear, SolarSeason, SolarMonth, SolarWeek, SolarDay, SolarTime
from .lunar import LunarYear, LunarSeason, LunarMonth, LunarWeek, LunarDay, LunarHour
from .sixtycycle import (
    HeavenStem,
    EarthBranch,
    SixtyCycle,
    SixtyCycleYear,
    SixtyCycleMonth,
    SixtyCycleDay,
    SixtyCycleHour,
)
from .eightchar import EightChar, ChildLimit, ChildLimitInfo, DecadeFortune, Fortune

__all__ = [
    "list_kernels",
    "register_kernel",
    "use_kernel",
    "active_kernel",
    "solar_to_lunar",
    "lunar_to_solar",
    "terms_of_year",
    "lunar_hour",
    "eight_char",
    "child_limit",
    "NongliError",
    "InvalidDate",
    "InvalidLunarMonth",
    "InvalidLeapMonth",
    "InvalidTimeField",
    "InvalidName",
    "KernelUnavailableError",
    "KernelRangeError",
    "Gender",
    "YinYang",
    "JulianDay",
    "Week",
    "SolarTerm",
    "SolarTermDay",
    "SolarYear",
    "SolarHalfYear",
    "SolarSeason",
    "SolarMonth",
    "SolarWeek",
    "SolarDay",
    "SolarTime",
    "LunarYear",
    "LunarSeason",
    "LunarMonth",
    "LunarWeek",
    "LunarDay",
    "LunarHour",
    "HeavenStem",
    "EarthBranch",
    "SixtyCycle",
    "SixtyCycleYear",
    "SixtyCycleMonth",
    "SixtyCycleDay",
    "SixtyCycleHour",
    "EightChar",
    "ChildLimit",
    "ChildLimitInfo",
    "DecadeFortune",
    "Fortune",
]
