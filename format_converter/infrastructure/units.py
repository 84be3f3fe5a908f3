"""Physical-quantity conversions through a pivot unit.

Each family maps every member id to its size in the family's pivot unit, so
``value_in_pivot = value * factor``. A family may also hold reciprocal members
(``value_in_pivot = constant / value``), which is how fuel consumption in
L/100 km relates to km/L. Temperature is affine and handled separately; it is
never expressed as a scale factor.
"""
import math
import re
from dataclasses import dataclass, field
from typing import Callable, Dict, Iterator, Tuple

from ..domain.errors import DecodeError, RangeError
from ..domain.format_ids import FormatId as F

DEFAULT_SIGNIFICANT_DIGITS = 10
DEFAULT_TEMPERATURE_DECIMALS = 2

# Magnitudes outside [EXPONENT_LOW, EXPONENT_HIGH) render in exponent notation.
EXPONENT_HIGH = 1e15
EXPONENT_LOW = 1e-6

_QUANTITY = re.compile(
    r"^\s*(?P<number>[-+]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][-+]?\d+)?)"
    r"\s*(?P<label>[^\d\s.,+\-][^\n]*)?\s*$"
)


def parse_quantity(text: str) -> float:
    """Parse a number, tolerating surrounding whitespace and a trailing unit label."""
    match = _QUANTITY.match(text)
    if match is None:
        raise DecodeError(f"Not a number: {text.strip()!r}")
    value = float(match.group("number"))
    if not math.isfinite(value):
        raise DecodeError(f"Not a finite number: {text.strip()!r}")
    return value


def _strip_zeros(digits: str) -> str:
    if "." in digits:
        digits = digits.rstrip("0").rstrip(".")
    return digits


def format_quantity(value: float, significant_digits: int = DEFAULT_SIGNIFICANT_DIGITS) -> str:
    """Round to significant figures and drop trailing zeros.

    Examples:
        >>> format_quantity(2.54)
        '2.54'
        >>> format_quantity(1 / 3, 4)
        '0.3333'
        >>> format_quantity(9.4607304725808e15)
        '9.460730473e+15'
    """
    if not math.isfinite(value):
        raise RangeError("Result is not a finite number")
    if value == 0:
        return "0"
    magnitude = abs(value)
    if magnitude >= EXPONENT_HIGH or magnitude < EXPONENT_LOW:
        mantissa, exponent = f"{value:.{significant_digits - 1}e}".split("e")
        return f"{_strip_zeros(mantissa)}e{int(exponent):+d}"
    decimals = significant_digits - 1 - math.floor(math.log10(magnitude))
    rounded = round(value, decimals)
    text = _strip_zeros(f"{rounded:.{max(decimals, 0)}f}")
    return "0" if text in ("-0", "") else text


@dataclass(frozen=True)
class UnitFamily:
    """A set of units related by scale factors to one pivot unit."""

    name: str
    pivot: F
    factors: Dict[F, float]
    reciprocals: Dict[F, float] = field(default_factory=dict)
    non_negative: bool = False

    @property
    def members(self) -> Tuple[F, ...]:
        return tuple(self.factors) + tuple(self.reciprocals)

    def to_pivot(self, value: float, unit: F) -> float:
        if self.non_negative and value < 0:
            raise RangeError(f"{self.name} cannot be negative")
        if unit in self.reciprocals:
            if value == 0:
                raise RangeError(f"Zero {unit.value} has no reciprocal")
            return self.reciprocals[unit] / value
        return value * self.factors[unit]

    def from_pivot(self, value: float, unit: F) -> float:
        if unit in self.reciprocals:
            if value == 0:
                raise RangeError(f"Zero {self.pivot.value} has no reciprocal")
            return self.reciprocals[unit] / value
        return value / self.factors[unit]

    def convert(self, value: float, source: F, target: F) -> float:
        return self.from_pivot(self.to_pivot(value, source), target)

    def pairs(self) -> Iterator[Tuple[F, F]]:
        """Every ordered pair of distinct members."""
        for source in self.members:
            for target in self.members:
                if source != target:
                    yield source, target

    def converter(
        self,
        source: F,
        target: F,
        significant_digits: int = DEFAULT_SIGNIFICANT_DIGITS,
    ) -> Callable[[str], str]:
        def convert(text: str) -> str:
            return format_quantity(self.convert(parse_quantity(text), source, target), significant_digits)

        convert.__name__ = f"{source.value}_to_{target.value}".replace("-", "_")
        return convert


INCH = 0.0254
POUND = 453.59237
STANDARD_GRAVITY = 9.80665
US_GALLON = 3.785411784
FOOT = 0.3048

FAMILIES: Tuple[UnitFamily, ...] = (
    UnitFamily("Length", F.METERS, {
        F.METERS: 1.0, F.KM: 1000.0, F.CM: 0.01, F.MM: 0.001,
        F.MICROMETERS: 1e-6, F.NANOMETERS: 1e-9, F.INCHES: INCH, F.FEET: FOOT,
        F.YARDS: 0.9144, F.MILES: 1609.344, F.NAUTMILES: 1852.0,
        F.LIGHT_YEAR: 9.4607304725808e15, F.AU: 1.495978707e11,
        F.PT: INCH / 72, F.PT_TYPE: INCH / 72, F.PICA: INCH / 6,
        F.PX: INCH / 96, F.SCREEN_PX: INCH / 96, F.TWIP: INCH / 1440,
    }),
    UnitFamily("Weight", F.GRAMS, {
        F.GRAMS: 1.0, F.KG: 1000.0, F.MILLIGRAMS: 1e-3, F.MICROGRAMS: 1e-6,
        F.LB: POUND, F.OZ: POUND / 16, F.STONE: POUND * 14,
        F.TON_METRIC: 1e6, F.TON_SHORT: POUND * 2000,
        F.TROY_OZ: 31.1034768, F.CARATS: 0.2,
    }),
    UnitFamily("Speed", F.MS, {
        F.MS: 1.0, F.KMH: 1 / 3.6, F.MPH: 0.44704, F.KNOTS: 1852 / 3600,
        F.FPS: FOOT, F.MACH: 343.0,
    }),
    UnitFamily("Area", F.SQM, {
        F.SQM: 1.0, F.SQKM: 1e6, F.SQCM: 1e-4, F.SQFT: FOOT ** 2,
        F.SQINCHES: INCH ** 2, F.SQMILES: 1609.344 ** 2, F.ACRES: 4046.8564224,
        F.HECTARES: 1e4,
    }),
    UnitFamily("Volume", F.LITERS, {
        F.LITERS: 1.0, F.ML: 1e-3, F.CUBIC_M: 1000.0, F.CUBIC_FT: 28.316846592,
        F.GALLONS: US_GALLON, F.GALLON_US: US_GALLON,
        F.QT_COOK: US_GALLON / 4, F.PINT_COOK: US_GALLON / 8,
        F.CUPS: US_GALLON / 16, F.CUP_COOK: US_GALLON / 16,
        F.FLOZ: US_GALLON / 128, F.FLOZ_COOK: US_GALLON / 128,
        F.TBSP: US_GALLON / 256, F.TSP: US_GALLON / 768,
    }),
    UnitFamily("Duration", F.DUR_SECONDS, {
        F.DUR_NS: 1e-9, F.DUR_US: 1e-6, F.DUR_MS: 1e-3, F.DUR_SECONDS: 1.0,
        F.DUR_MINUTES: 60.0, F.DUR_HOURS: 3600.0, F.DUR_DAYS: 86400.0,
        F.DUR_WEEKS: 604800.0, F.DUR_MONTHS: 30.4375 * 86400, F.DUR_YEARS: 365.25 * 86400,
    }),
    UnitFamily("Energy", F.JOULES, {
        F.JOULES: 1.0, F.MEGAJOULES: 1e6, F.CALORIES: 4.184, F.KCAL: 4184.0,
        F.KWH: 3.6e6, F.BTU: 1055.05585262,
    }),
    UnitFamily("Pressure", F.PASCAL, {
        F.PASCAL: 1.0, F.KPA: 1000.0, F.HPA: 100.0, F.BAR: 1e5, F.ATM: 101325.0,
        F.PSI: 6894.757293168, F.MMHG: 133.322387415,
    }),
    UnitFamily("Angle", F.DEGREES, {
        F.DEGREES: 1.0, F.RADIANS: 180 / math.pi, F.GRADIANS: 0.9, F.TURNS: 360.0,
        F.ARCMINUTES: 1 / 60, F.ARCSECONDS: 1 / 3600,
    }),
    UnitFamily("Frequency", F.HZ, {
        F.HZ: 1.0, F.KHZ: 1e3, F.MHZ: 1e6, F.GHZ: 1e9, F.GIGAHERTZ: 1e9,
        F.TERAHERTZ: 1e12, F.RPM: 1 / 60, F.RADIANS_PER_SEC: 1 / (2 * math.pi),
    }),
    UnitFamily("Power", F.WATTS, {
        F.WATTS: 1.0, F.KILOWATTS: 1000.0, F.HORSEPOWER: 745.6998715822702,
        F.BTUH: 0.29307107017, F.BTU_PER_HR: 0.29307107017, F.CALORIES_PER_SEC: 4.184,
    }),
    UnitFamily(
        "Fuel economy",
        F.KML,
        {F.KML: 1.0, F.MPG: 1.609344 / US_GALLON},
        reciprocals={F.L100KM: 100.0},
    ),
    UnitFamily("Data rate", F.BPS, {
        F.BPS: 1.0, F.KBPS: 1e3, F.MBPS: 1e6, F.GBPS: 1e9, F.TBPS: 1e12,
    }, non_negative=True),
    UnitFamily("Data size", F.BYTES, {
        F.BITS: 0.125, F.BYTES: 1.0,
        F.KILOBYTES: 1e3, F.MEGABYTES: 1e6, F.GIGABYTES: 1e9,
        F.TERABYTES: 1e12, F.PETABYTES: 1e15,
        F.KIB: 1024.0, F.MIB: 1024.0 ** 2, F.GIB: 1024.0 ** 3,
    }, non_negative=True),
    UnitFamily("Torque", F.NM_TORQUE, {
        F.NM_TORQUE: 1.0, F.LB_FT: 4.4482216152605 * FOOT,
        F.LB_IN: 4.4482216152605 * INCH, F.KG_CM: STANDARD_GRAVITY / 100,
    }),
    UnitFamily("Force", F.NEWTONS, {
        F.NEWTONS: 1.0, F.NEWTON: 1.0, F.KILONEWTONS: 1000.0, F.KILONEWTON: 1000.0,
        F.DYNE: 1e-5, F.POUND_FORCE: 4.4482216152605,
        F.KG_FORCE: STANDARD_GRAVITY, F.KGFORCE: STANDARD_GRAVITY,
    }),
    UnitFamily("Illuminance", F.LUX, {
        F.LUX: 1.0, F.MILLILUX: 1e-3, F.NOX: 1e-3, F.PHOT: 1e4,
        F.FOOTCANDLE: 1 / FOOT ** 2, F.FOOT_CANDLE: 1 / FOOT ** 2,
    }),
    UnitFamily("Density", F.KGM3, {
        F.KGM3: 1.0, F.GCM3: 1000.0,
        F.LBFT3: POUND / 1000 / FOOT ** 3, F.LBGAL: POUND / US_GALLON,
    }),
    UnitFamily("Electric current", F.AMPERE, {
        F.AMPERE: 1.0, F.MILLIAMP: 1e-3, F.MICROAMP: 1e-6, F.KILOAMP: 1e3,
    }),
    UnitFamily("Voltage", F.VOLT, {
        F.VOLT: 1.0, F.MILLIVOLT: 1e-3, F.MICROVOLT: 1e-6, F.KILOVOLT: 1e3,
    }),
    UnitFamily("Resistance", F.OHM, {
        F.OHM: 1.0, F.MILLIOHM: 1e-3, F.KILOHM: 1e3, F.MEGOHM: 1e6,
    }),
    UnitFamily("Acceleration", F.MS2, {
        F.MS2: 1.0, F.CMS2: 0.01, F.FTS2: FOOT, F.GFORCE: STANDARD_GRAVITY,
    }),
    UnitFamily("Capacitance", F.FARAD, {
        F.FARAD: 1.0, F.MICROFARAD: 1e-6, F.NANOFARAD: 1e-9, F.PICOFARAD: 1e-12,
    }),
    UnitFamily("Ratio", F.DECIMAL_FRAC, {
        F.DECIMAL_FRAC: 1.0, F.PERCENT: 1e-2, F.PPM: 1e-6, F.PPB: 1e-9,
    }),
)


# -------------------- Temperature --------------------

ABSOLUTE_ZERO_TOLERANCE = 1e-9

TEMPERATURE_SCALES: Dict[F, Tuple[Callable[[float], float], Callable[[float], float], str]] = {
    # unit: (to kelvin, from kelvin, suffix)
    F.CELSIUS: (lambda c: c + 273.15, lambda k: k - 273.15, "°C"),
    F.FAHRENHEIT: (lambda f: (f - 32) * 5 / 9 + 273.15, lambda k: (k - 273.15) * 9 / 5 + 32, "°F"),
    F.KELVIN: (lambda k: k, lambda k: k, "K"),
    F.RANKINE: (lambda r: r * 5 / 9, lambda k: k * 9 / 5, "°R"),
}


def convert_temperature(value: float, source: F, target: F) -> float:
    to_kelvin = TEMPERATURE_SCALES[source][0]
    from_kelvin = TEMPERATURE_SCALES[target][1]
    kelvin = to_kelvin(value)
    if kelvin < -ABSOLUTE_ZERO_TOLERANCE:
        raise RangeError(f"{value} {TEMPERATURE_SCALES[source][2]} is below absolute zero")
    return from_kelvin(max(kelvin, 0.0))


def temperature_pairs() -> Iterator[Tuple[F, F]]:
    for source in TEMPERATURE_SCALES:
        for target in TEMPERATURE_SCALES:
            if source != target:
                yield source, target


def temperature_converter(
    source: F,
    target: F,
    decimals: int = DEFAULT_TEMPERATURE_DECIMALS,
) -> Callable[[str], str]:
    suffix = TEMPERATURE_SCALES[target][2]

    def convert(text: str) -> str:
        result = convert_temperature(parse_quantity(text), source, target)
        if not math.isfinite(result):
            raise RangeError("Result is not a finite number")
        rendered = f"{result:.{decimals}f}"
        if float(rendered) == 0:
            rendered = f"{0:.{decimals}f}"
        return f"{rendered} {suffix}"

    convert.__name__ = f"{source.value}_to_{target.value}"
    return convert


def family_of(unit: F) -> UnitFamily:
    for family in FAMILIES:
        if unit in family.factors or unit in family.reciprocals:
            return family
    raise KeyError(unit)
