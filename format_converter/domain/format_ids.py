"""Closed set of format identifiers.

Format ids are the wire format of the converter: stable, lowercase,
hyphenated tokens that external callers persist (history, favourites, URLs).
Renaming a member value requires a migration path.
"""
from enum import Enum
from typing import List

from .errors import NotFoundError


class FormatId(str, Enum):
    """Every format known to the catalog."""

    TEXT = "text"
    BASE64 = "base64"
    BASE32 = "base32"
    BASE58 = "base58"
    URL = "url"
    HTML_ENT = "html-ent"
    HEX = "hex"
    BINARY = "binary"
    UNICODE = "unicode"
    MORSE = "morse"
    NATO = "nato"
    ROT13 = "rot13"
    REVERSE = "reverse"
    JSON_ESCAPED = "json-escaped"
    UPPERCASE = "uppercase"
    LOWERCASE = "lowercase"
    TITLECASE = "titlecase"
    CAMELCASE = "camelcase"
    SNAKECASE = "snakecase"
    KEBABCASE = "kebabcase"
    MARKDOWN = "markdown"
    HTML_MARKUP = "html-markup"
    PLAIN = "plain"
    JSON = "json"
    JSON_MIN = "json-min"
    YAML = "yaml"
    CSV = "csv"
    TSV = "tsv"
    XML = "xml"
    QUERYSTRING = "querystring"
    TOML = "toml"
    TIMESTAMP = "timestamp"
    ISO_DATE = "iso-date"
    HUMAN_DATE = "human-date"
    SHA1 = "sha1"
    SHA256 = "sha256"
    SHA384 = "sha384"
    SHA512 = "sha512"
    MD5 = "md5"
    DECIMAL = "decimal"
    NUMHEX = "numhex"
    NUMBIN = "numbin"
    NUMOCT = "numoct"
    ROMAN = "roman"
    BITS = "bits"
    BYTES = "bytes"
    KILOBYTES = "kilobytes"
    MEGABYTES = "megabytes"
    GIGABYTES = "gigabytes"
    KIB = "kib"
    MIB = "mib"
    GIB = "gib"
    CELSIUS = "celsius"
    FAHRENHEIT = "fahrenheit"
    KELVIN = "kelvin"
    INCHES = "inches"
    CM = "cm"
    MM = "mm"
    FEET = "feet"
    METERS = "meters"
    MILES = "miles"
    KM = "km"
    YARDS = "yards"
    NAUTMILES = "nautmiles"
    KG = "kg"
    LB = "lb"
    OZ = "oz"
    GRAMS = "grams"
    TON_METRIC = "ton-metric"
    TON_SHORT = "ton-short"
    STONE = "stone"
    MPH = "mph"
    KMH = "kmh"
    MS = "ms"
    KNOTS = "knots"
    SQFT = "sqft"
    SQM = "sqm"
    ACRES = "acres"
    HECTARES = "hectares"
    LITERS = "liters"
    GALLONS = "gallons"
    ML = "ml"
    FLOZ = "floz"
    CUPS = "cups"
    DUR_SECONDS = "dur-seconds"
    DUR_MINUTES = "dur-minutes"
    DUR_HOURS = "dur-hours"
    DUR_DAYS = "dur-days"
    JOULES = "joules"
    CALORIES = "calories"
    KCAL = "kcal"
    KWH = "kwh"
    BTU = "btu"
    PSI = "psi"
    BAR = "bar"
    ATM = "atm"
    PASCAL = "pascal"
    MMHG = "mmhg"
    DEGREES = "degrees"
    RADIANS = "radians"
    GRADIANS = "gradians"
    TERABYTES = "terabytes"
    PETABYTES = "petabytes"
    HZ = "hz"
    KHZ = "khz"
    MHZ = "mhz"
    GHZ = "ghz"
    WATTS = "watts"
    KILOWATTS = "kilowatts"
    HORSEPOWER = "horsepower"
    BTUH = "btuh"
    MPG = "mpg"
    KML = "kml"
    L100KM = "l100km"
    BPS = "bps"
    KBPS = "kbps"
    MBPS = "mbps"
    GBPS = "gbps"
    TSP = "tsp"
    TBSP = "tbsp"
    CUP_COOK = "cup-cook"
    BRAILLE = "braille"
    PIGLATIN = "piglatin"
    LEETSPEAK = "leetspeak"
    BASE64URL = "base64url"
    ATBASH = "atbash"
    RANKINE = "rankine"
    TURNS = "turns"
    TBPS = "tbps"
    COLOR_HEX = "color-hex"
    COLOR_RGB = "color-rgb"
    COLOR_HSL = "color-hsl"
    COLOR_HSV = "color-hsv"
    COLOR_CMYK = "color-cmyk"
    PINT_COOK = "pint-cook"
    QT_COOK = "qt-cook"
    FLOZ_COOK = "floz-cook"
    DUR_MS = "dur-ms"
    DUR_WEEKS = "dur-weeks"
    DUR_US = "dur-us"
    DUR_NS = "dur-ns"
    DUR_MONTHS = "dur-months"
    DUR_YEARS = "dur-years"
    MEGAJOULES = "megajoules"
    FPS = "fps"
    MACH = "mach"
    MICROMETERS = "micrometers"
    NANOMETERS = "nanometers"
    LIGHT_YEAR = "light-year"
    AU = "au"
    GALLON_US = "gallon-us"
    MILLIGRAMS = "milligrams"
    MICROGRAMS = "micrograms"
    CARATS = "carats"
    BTU_PER_HR = "btu-per-hr"
    CALORIES_PER_SEC = "calories-per-sec"
    RPM = "rpm"
    RADIANS_PER_SEC = "radians-per-sec"
    TROY_OZ = "troy-oz"
    SQKM = "sqkm"
    SQMILES = "sqmiles"
    SQINCHES = "sqinches"
    SQCM = "sqcm"
    KPA = "kpa"
    HPA = "hpa"
    ARCMINUTES = "arcminutes"
    ARCSECONDS = "arcseconds"
    CUBIC_M = "cubic-m"
    CUBIC_FT = "cubic-ft"
    NEWTONS = "newtons"
    POUND_FORCE = "pound-force"
    KG_FORCE = "kg-force"
    DYNE = "dyne"
    KILONEWTONS = "kilonewtons"
    LUX = "lux"
    FOOT_CANDLE = "foot-candle"
    MILLILUX = "millilux"
    PT = "pt"
    PICA = "pica"
    PX = "px"
    KGM3 = "kgm3"
    GCM3 = "gcm3"
    LBFT3 = "lbft3"
    LBGAL = "lbgal"
    AMPERE = "ampere"
    MILLIAMP = "milliamp"
    MICROAMP = "microamp"
    KILOAMP = "kiloamp"
    VOLT = "volt"
    MILLIVOLT = "millivolt"
    KILOVOLT = "kilovolt"
    MICROVOLT = "microvolt"
    OHM = "ohm"
    KILOHM = "kilohm"
    MEGOHM = "megohm"
    MILLIOHM = "milliohm"
    MS2 = "ms2"
    GFORCE = "gforce"
    FTS2 = "fts2"
    CMS2 = "cms2"
    NM_TORQUE = "nm-torque"
    LB_FT = "lb-ft"
    LB_IN = "lb-in"
    KG_CM = "kg-cm"
    NEWTON = "newton"
    KILONEWTON = "kilonewton"
    KGFORCE = "kgforce"
    FOOTCANDLE = "footcandle"
    PHOT = "phot"
    NOX = "nox"
    FARAD = "farad"
    MICROFARAD = "microfarad"
    NANOFARAD = "nanofarad"
    PICOFARAD = "picofarad"
    TERAHERTZ = "terahertz"
    GIGAHERTZ = "gigahertz"
    PERCENT = "percent"
    DECIMAL_FRAC = "decimal-frac"
    PPM = "ppm"
    PPB = "ppb"
    PT_TYPE = "pt-type"
    SCREEN_PX = "screen-px"
    TWIP = "twip"

    @classmethod
    def from_string(cls, value: str) -> "FormatId":
        """Convert a string to a FormatId.

        Raises:
            NotFoundError: If no format uses this id
        """
        if isinstance(value, cls):
            return value
        normalized = (value or "").strip().lower()
        try:
            return cls(normalized)
        except ValueError:
            raise NotFoundError(f"Unknown format id: {value!r}") from None

    @classmethod
    def all_ids(cls) -> List["FormatId"]:
        """Get all format ids in catalog order."""
        return list(cls)
