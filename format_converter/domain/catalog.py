"""Format catalog: display metadata for every format id."""
from dataclasses import dataclass
from typing import Dict, List, Optional, Union

from .errors import NotFoundError
from .format_ids import FormatId


@dataclass(frozen=True)
class FormatDescriptor:
    """Immutable description of a format."""
    id: FormatId
    display_name: str
    group: str
    example_placeholder: Optional[str] = None

    def to_dict(self) -> Dict[str, Optional[str]]:
        """Convert to dictionary."""
        return {
            "id": self.id.value,
            "display_name": self.display_name,
            "group": self.group,
            "example_placeholder": self.example_placeholder,
        }


FORMAT_CATALOG = (
    FormatDescriptor(FormatId.TEXT, "Text", "Text", "Type or paste text..."),
    FormatDescriptor(FormatId.BASE64, "Base64", "Text", "SGVsbG8gV29ybGQ="),
    FormatDescriptor(FormatId.BASE32, "Base32", "Text", "JBSWY3DPEBLW64TMMQ======"),
    FormatDescriptor(FormatId.BASE58, "Base58", "Text", "StV1DL6CwTryKyV"),
    FormatDescriptor(FormatId.URL, "URL Encoded", "Text", "hello%20world"),
    FormatDescriptor(FormatId.HTML_ENT, "HTML Entities", "Text", "&lt;div&gt;hello&lt;/div&gt;"),
    FormatDescriptor(FormatId.HEX, "Hex", "Text", "48 65 6c 6c 6f"),
    FormatDescriptor(FormatId.BINARY, "Binary", "Text", "01001000 01100101 01101100 01101100 01101111"),
    FormatDescriptor(FormatId.UNICODE, "Unicode Escaped", "Text", "\\u0048\\u0065\\u006c\\u006c\\u006f"),
    FormatDescriptor(FormatId.MORSE, "Morse Code", "Text", ".... . .-.. .-.. ---"),
    FormatDescriptor(FormatId.NATO, "NATO Phonetic", "Text", "Alfa Bravo Charlie"),
    FormatDescriptor(FormatId.ROT13, "ROT13", "Text", "Uryyb Jbeyq"),
    FormatDescriptor(FormatId.REVERSE, "Reversed", "Text", "dlroW olleH"),
    FormatDescriptor(FormatId.JSON_ESCAPED, "JSON String", "Text", '"Hello\\nWorld\\t\\"quoted\\"" '),
    FormatDescriptor(FormatId.UPPERCASE, "UPPERCASE", "Case", "HELLO WORLD"),
    FormatDescriptor(FormatId.LOWERCASE, "lowercase", "Case", "hello world"),
    FormatDescriptor(FormatId.TITLECASE, "Title Case", "Case", "Hello World"),
    FormatDescriptor(FormatId.CAMELCASE, "camelCase", "Case", "helloWorld"),
    FormatDescriptor(FormatId.SNAKECASE, "snake_case", "Case", "hello_world"),
    FormatDescriptor(FormatId.KEBABCASE, "kebab-case", "Case", "hello-world"),
    FormatDescriptor(FormatId.MARKDOWN, "Markdown", "Markup", "# Hello **world**"),
    FormatDescriptor(FormatId.HTML_MARKUP, "HTML", "Markup", "<h1>Hello <strong>world</strong></h1>"),
    FormatDescriptor(FormatId.PLAIN, "Plain Text", "Markup", "Hello world"),
    FormatDescriptor(FormatId.JSON, "JSON", "Data", '{"key": "value"}'),
    FormatDescriptor(FormatId.JSON_MIN, "JSON Minified", "Data", '{"key":"value"}'),
    FormatDescriptor(FormatId.YAML, "YAML", "Data", "key: value\nitems:\n  - one\n  - two"),
    FormatDescriptor(FormatId.CSV, "CSV", "Data", "name,age\nAlice,30\nBob,25"),
    FormatDescriptor(FormatId.TSV, "TSV", "Data", "name\tage\nAlice\t30\nBob\t25"),
    FormatDescriptor(FormatId.XML, "XML", "Data", "<root><item>hello</item></root>"),
    FormatDescriptor(FormatId.QUERYSTRING, "Query String", "Data", "key=value&foo=bar"),
    FormatDescriptor(FormatId.TOML, "TOML", "Data", 'key = "value"\n[section]\nname = "test"'),
    FormatDescriptor(FormatId.TIMESTAMP, "Unix Timestamp", "Time", "1700000000"),
    FormatDescriptor(FormatId.ISO_DATE, "ISO 8601", "Time", "2024-01-15T12:00:00Z"),
    FormatDescriptor(FormatId.HUMAN_DATE, "Human Date", "Time", "Mon, 15 Jan 2024 12:00:00 GMT"),
    FormatDescriptor(FormatId.SHA1, "SHA-1 Hash", "Hash"),
    FormatDescriptor(FormatId.SHA256, "SHA-256 Hash", "Hash"),
    FormatDescriptor(FormatId.SHA384, "SHA-384 Hash", "Hash"),
    FormatDescriptor(FormatId.SHA512, "SHA-512 Hash", "Hash"),
    FormatDescriptor(FormatId.MD5, "MD5 Hash", "Hash"),
    FormatDescriptor(FormatId.DECIMAL, "Decimal", "Number", "255"),
    FormatDescriptor(FormatId.NUMHEX, "Hexadecimal", "Number", "0xFF"),
    FormatDescriptor(FormatId.NUMBIN, "Binary (Num)", "Number", "0b11111111"),
    FormatDescriptor(FormatId.NUMOCT, "Octal", "Number", "0o377"),
    FormatDescriptor(FormatId.ROMAN, "Roman Numeral", "Number", "CCLV"),
    FormatDescriptor(FormatId.BITS, "Bits", "Data Size", "8388608"),
    FormatDescriptor(FormatId.BYTES, "Bytes", "Data Size", "1048576"),
    FormatDescriptor(FormatId.KILOBYTES, "Kilobytes", "Data Size", "1024"),
    FormatDescriptor(FormatId.MEGABYTES, "Megabytes", "Data Size", "1"),
    FormatDescriptor(FormatId.GIGABYTES, "Gigabytes", "Data Size", "0.5"),
    FormatDescriptor(FormatId.KIB, "Kibibytes (KiB)", "Data Size", "1000"),
    FormatDescriptor(FormatId.MIB, "Mebibytes (MiB)", "Data Size", "0.977"),
    FormatDescriptor(FormatId.GIB, "Gibibytes (GiB)", "Data Size", "0.00095"),
    FormatDescriptor(FormatId.CELSIUS, "Celsius", "Temperature", "100"),
    FormatDescriptor(FormatId.FAHRENHEIT, "Fahrenheit", "Temperature", "212"),
    FormatDescriptor(FormatId.KELVIN, "Kelvin", "Temperature", "373.15"),
    FormatDescriptor(FormatId.INCHES, "Inches", "Length", "12"),
    FormatDescriptor(FormatId.CM, "Centimeters", "Length", "30.48"),
    FormatDescriptor(FormatId.MM, "Millimeters", "Length", "304.8"),
    FormatDescriptor(FormatId.FEET, "Feet", "Length", "1"),
    FormatDescriptor(FormatId.METERS, "Meters", "Length", "0.3048"),
    FormatDescriptor(FormatId.MILES, "Miles", "Distance", "1"),
    FormatDescriptor(FormatId.KM, "Kilometers", "Distance", "1.609"),
    FormatDescriptor(FormatId.YARDS, "Yards", "Distance", "1760"),
    FormatDescriptor(FormatId.NAUTMILES, "Nautical Miles", "Distance", "0.8684"),
    FormatDescriptor(FormatId.KG, "Kilograms", "Weight", "1"),
    FormatDescriptor(FormatId.LB, "Pounds", "Weight", "2.205"),
    FormatDescriptor(FormatId.OZ, "Ounces", "Weight", "35.274"),
    FormatDescriptor(FormatId.GRAMS, "Grams", "Weight", "1000"),
    FormatDescriptor(FormatId.TON_METRIC, "Tonnes (metric)", "Weight", "0.001"),
    FormatDescriptor(FormatId.TON_SHORT, "Short Tons (US)", "Weight", "0.0011"),
    FormatDescriptor(FormatId.STONE, "Stones", "Weight", "0.1575"),
    FormatDescriptor(FormatId.MPH, "Miles/hour", "Speed", "60"),
    FormatDescriptor(FormatId.KMH, "km/hour", "Speed", "96.56"),
    FormatDescriptor(FormatId.MS, "Meters/sec", "Speed", "26.82"),
    FormatDescriptor(FormatId.KNOTS, "Knots", "Speed", "52.14"),
    FormatDescriptor(FormatId.SQFT, "Square Feet", "Area", "100"),
    FormatDescriptor(FormatId.SQM, "Square Meters", "Area", "9.29"),
    FormatDescriptor(FormatId.ACRES, "Acres", "Area", "1"),
    FormatDescriptor(FormatId.HECTARES, "Hectares", "Area", "0.4047"),
    FormatDescriptor(FormatId.LITERS, "Liters", "Volume", "1"),
    FormatDescriptor(FormatId.GALLONS, "Gallons (US)", "Volume", "0.2642"),
    FormatDescriptor(FormatId.ML, "Milliliters", "Volume", "1000"),
    FormatDescriptor(FormatId.FLOZ, "Fluid Ounces", "Volume", "33.814"),
    FormatDescriptor(FormatId.CUPS, "Cups", "Volume", "4.227"),
    FormatDescriptor(FormatId.DUR_SECONDS, "Seconds", "Duration", "3600"),
    FormatDescriptor(FormatId.DUR_MINUTES, "Minutes", "Duration", "60"),
    FormatDescriptor(FormatId.DUR_HOURS, "Hours", "Duration", "1"),
    FormatDescriptor(FormatId.DUR_DAYS, "Days", "Duration", "0.0417"),
    FormatDescriptor(FormatId.JOULES, "Joules", "Energy", "1000"),
    FormatDescriptor(FormatId.CALORIES, "Calories", "Energy", "239.006"),
    FormatDescriptor(FormatId.KCAL, "Kilocalories", "Energy", "0.239"),
    FormatDescriptor(FormatId.KWH, "Kilowatt-hours", "Energy", "0.000278"),
    FormatDescriptor(FormatId.BTU, "BTU", "Energy", "0.9478"),
    FormatDescriptor(FormatId.PSI, "PSI", "Pressure", "14.696"),
    FormatDescriptor(FormatId.BAR, "Bar", "Pressure", "1.01325"),
    FormatDescriptor(FormatId.ATM, "Atmospheres", "Pressure", "1"),
    FormatDescriptor(FormatId.PASCAL, "Pascals", "Pressure", "101325"),
    FormatDescriptor(FormatId.MMHG, "mmHg", "Pressure", "760"),
    FormatDescriptor(FormatId.DEGREES, "Degrees", "Angle", "180"),
    FormatDescriptor(FormatId.RADIANS, "Radians", "Angle", "3.14159"),
    FormatDescriptor(FormatId.GRADIANS, "Gradians", "Angle", "200"),
    FormatDescriptor(FormatId.TERABYTES, "Terabytes", "Data Size", "0.001"),
    FormatDescriptor(FormatId.PETABYTES, "Petabytes", "Data Size", "0.000001"),
    FormatDescriptor(FormatId.HZ, "Hertz", "Frequency", "1000"),
    FormatDescriptor(FormatId.KHZ, "Kilohertz", "Frequency", "1"),
    FormatDescriptor(FormatId.MHZ, "Megahertz", "Frequency", "0.001"),
    FormatDescriptor(FormatId.GHZ, "Gigahertz", "Frequency", "0.000001"),
    FormatDescriptor(FormatId.WATTS, "Watts", "Power", "1000"),
    FormatDescriptor(FormatId.KILOWATTS, "Kilowatts", "Power", "1"),
    FormatDescriptor(FormatId.HORSEPOWER, "Horsepower", "Power", "1.341"),
    FormatDescriptor(FormatId.BTUH, "BTU/hour", "Power", "3412.14"),
    FormatDescriptor(FormatId.MPG, "Miles/gallon", "Fuel Economy", "30"),
    FormatDescriptor(FormatId.KML, "km/Liter", "Fuel Economy", "12.75"),
    FormatDescriptor(FormatId.L100KM, "L/100km", "Fuel Economy", "7.84"),
    FormatDescriptor(FormatId.BPS, "Bits/sec", "Data Rate", "1000000"),
    FormatDescriptor(FormatId.KBPS, "Kbps", "Data Rate", "1000"),
    FormatDescriptor(FormatId.MBPS, "Mbps", "Data Rate", "1"),
    FormatDescriptor(FormatId.GBPS, "Gbps", "Data Rate", "0.001"),
    FormatDescriptor(FormatId.TSP, "Teaspoons", "Cooking", "3"),
    FormatDescriptor(FormatId.TBSP, "Tablespoons", "Cooking", "1"),
    FormatDescriptor(FormatId.CUP_COOK, "Cups (US)", "Cooking", "0.0625"),
    FormatDescriptor(FormatId.BRAILLE, "Braille", "Text", "⠓⠑⠇⠇⠕"),
    FormatDescriptor(FormatId.PIGLATIN, "Pig Latin", "Text", "ellohay orldway"),
    FormatDescriptor(FormatId.LEETSPEAK, "Leet Speak", "Text", "h3ll0 w0rld"),
    FormatDescriptor(FormatId.BASE64URL, "Base64 URL", "Text", "SGVsbG8gV29ybGQ"),
    FormatDescriptor(FormatId.ATBASH, "Atbash", "Text", "Svool Dliow"),
    FormatDescriptor(FormatId.RANKINE, "Rankine", "Temperature", "671.67"),
    FormatDescriptor(FormatId.TURNS, "Turns", "Angle", "0.5"),
    FormatDescriptor(FormatId.TBPS, "Tbps", "Data Rate", "0.000001"),
    FormatDescriptor(FormatId.COLOR_HEX, "Color HEX", "Color", "#ff6b35"),
    FormatDescriptor(FormatId.COLOR_RGB, "Color RGB", "Color", "rgb(255, 107, 53)"),
    FormatDescriptor(FormatId.COLOR_HSL, "Color HSL", "Color", "hsl(16, 100%, 60%)"),
    FormatDescriptor(FormatId.COLOR_HSV, "Color HSV", "Color", "hsv(16, 79%, 100%)"),
    FormatDescriptor(FormatId.COLOR_CMYK, "Color CMYK", "Color", "cmyk(0%, 58%, 79%, 0%)"),
    FormatDescriptor(FormatId.PINT_COOK, "Pints (US)", "Cooking", "0.03125"),
    FormatDescriptor(FormatId.QT_COOK, "Quarts (US)", "Cooking", "0.015625"),
    FormatDescriptor(FormatId.FLOZ_COOK, "Fluid Oz (US)", "Cooking", "0.5"),
    FormatDescriptor(FormatId.DUR_MS, "Milliseconds", "Duration", "3600000"),
    FormatDescriptor(FormatId.DUR_WEEKS, "Weeks", "Duration", "0.006"),
    FormatDescriptor(FormatId.DUR_US, "Microseconds", "Duration", "3600000000"),
    FormatDescriptor(FormatId.DUR_NS, "Nanoseconds", "Duration", "3.6e12"),
    FormatDescriptor(FormatId.DUR_MONTHS, "Months", "Duration", "0.00137"),
    FormatDescriptor(FormatId.DUR_YEARS, "Years", "Duration", "0.000114"),
    FormatDescriptor(FormatId.MEGAJOULES, "Megajoules", "Energy", "0.001"),
    FormatDescriptor(FormatId.FPS, "Feet/sec", "Speed", "88"),
    FormatDescriptor(FormatId.MACH, "Mach", "Speed", "0.0767"),
    FormatDescriptor(FormatId.MICROMETERS, "Micrometers", "Length", "304800"),
    FormatDescriptor(FormatId.NANOMETERS, "Nanometers", "Length", "304800000"),
    FormatDescriptor(FormatId.LIGHT_YEAR, "Light Years", "Distance", "1"),
    FormatDescriptor(FormatId.AU, "Astronomical Units", "Distance", "63241"),
    FormatDescriptor(FormatId.GALLON_US, "Gallons (US)", "Cooking", "1"),
    FormatDescriptor(FormatId.MILLIGRAMS, "Milligrams", "Weight", "453592"),
    FormatDescriptor(FormatId.MICROGRAMS, "Micrograms", "Weight", "453592000"),
    FormatDescriptor(FormatId.CARATS, "Carats", "Weight", "5000"),
    FormatDescriptor(FormatId.BTU_PER_HR, "BTU/hour", "Power", "3412"),
    FormatDescriptor(FormatId.CALORIES_PER_SEC, "cal/sec", "Power", "239"),
    FormatDescriptor(FormatId.RPM, "RPM", "Frequency", "60"),
    FormatDescriptor(FormatId.RADIANS_PER_SEC, "Radians/sec (ω)", "Frequency", "6.2832"),
    FormatDescriptor(FormatId.TROY_OZ, "Troy Ounce", "Weight", "32.15"),
    FormatDescriptor(FormatId.SQKM, "Square Kilometers", "Area", "1"),
    FormatDescriptor(FormatId.SQMILES, "Square Miles", "Area", "0.3861"),
    FormatDescriptor(FormatId.SQINCHES, "Square Inches", "Area", "1550"),
    FormatDescriptor(FormatId.SQCM, "Square Centimeters", "Area", "92.9"),
    FormatDescriptor(FormatId.KPA, "Kilopascals (kPa)", "Pressure", "101.325"),
    FormatDescriptor(FormatId.HPA, "Hectopascals (hPa)", "Pressure", "1013.25"),
    FormatDescriptor(FormatId.ARCMINUTES, "Arcminutes", "Angle", "10800"),
    FormatDescriptor(FormatId.ARCSECONDS, "Arcseconds", "Angle", "648000"),
    FormatDescriptor(FormatId.CUBIC_M, "Cubic Meters", "Volume", "0.001"),
    FormatDescriptor(FormatId.CUBIC_FT, "Cubic Feet", "Volume", "0.0353"),
    FormatDescriptor(FormatId.NEWTONS, "Newtons", "Force", "9.807"),
    FormatDescriptor(FormatId.POUND_FORCE, "Pound-force (lbf)", "Force", "2.205"),
    FormatDescriptor(FormatId.KG_FORCE, "Kilogram-force (kgf)", "Force", "1"),
    FormatDescriptor(FormatId.DYNE, "Dyne", "Force", "980665"),
    FormatDescriptor(FormatId.KILONEWTONS, "Kilonewtons", "Force", "0.009807"),
    FormatDescriptor(FormatId.LUX, "Lux", "Illuminance", "500"),
    FormatDescriptor(FormatId.FOOT_CANDLE, "Foot-candle", "Illuminance", "46.45"),
    FormatDescriptor(FormatId.MILLILUX, "Millilux", "Illuminance", "500000"),
    FormatDescriptor(FormatId.PT, "Points (pt)", "Typography", "72"),
    FormatDescriptor(FormatId.PICA, "Picas", "Typography", "6"),
    FormatDescriptor(FormatId.PX, "Pixels (96 DPI)", "Typography", "96"),
    FormatDescriptor(FormatId.KGM3, "kg/m³", "Density", "1000"),
    FormatDescriptor(FormatId.GCM3, "g/cm³", "Density", "1"),
    FormatDescriptor(FormatId.LBFT3, "lb/ft³", "Density", "62.43"),
    FormatDescriptor(FormatId.LBGAL, "lb/gal (US)", "Density", "8.34"),
    FormatDescriptor(FormatId.AMPERE, "Amperes (A)", "Electric", "1"),
    FormatDescriptor(FormatId.MILLIAMP, "Milliamperes (mA)", "Electric", "1000"),
    FormatDescriptor(FormatId.MICROAMP, "Microamperes (μA)", "Electric", "1000000"),
    FormatDescriptor(FormatId.KILOAMP, "Kiloamperes (kA)", "Electric", "0.001"),
    FormatDescriptor(FormatId.VOLT, "Volts (V)", "Voltage", "120"),
    FormatDescriptor(FormatId.MILLIVOLT, "Millivolts (mV)", "Voltage", "120000"),
    FormatDescriptor(FormatId.KILOVOLT, "Kilovolts (kV)", "Voltage", "0.12"),
    FormatDescriptor(FormatId.MICROVOLT, "Microvolts (μV)", "Voltage", "120000000"),
    FormatDescriptor(FormatId.OHM, "Ohms (Ω)", "Resistance", "1000"),
    FormatDescriptor(FormatId.KILOHM, "Kilohms (kΩ)", "Resistance", "1"),
    FormatDescriptor(FormatId.MEGOHM, "Megohms (MΩ)", "Resistance", "0.001"),
    FormatDescriptor(FormatId.MILLIOHM, "Milliohms (mΩ)", "Resistance", "1000000"),
    FormatDescriptor(FormatId.MS2, "m/s²", "Acceleration", "9.81"),
    FormatDescriptor(FormatId.GFORCE, "g-force", "Acceleration", "1"),
    FormatDescriptor(FormatId.FTS2, "ft/s²", "Acceleration", "32.17"),
    FormatDescriptor(FormatId.CMS2, "cm/s² (Gal)", "Acceleration", "981"),
    FormatDescriptor(FormatId.NM_TORQUE, "Newton-meters (N·m)", "Torque", "100"),
    FormatDescriptor(FormatId.LB_FT, "Pound-feet (lb·ft)", "Torque", "73.76"),
    FormatDescriptor(FormatId.LB_IN, "Pound-inches (lb·in)", "Torque", "885.1"),
    FormatDescriptor(FormatId.KG_CM, "Kilogram-cm (kg·cm)", "Torque", "1019.7"),
    FormatDescriptor(FormatId.NEWTON, "Newtons (N)", "Force", "9.81"),
    FormatDescriptor(FormatId.KILONEWTON, "Kilonewtons (kN)", "Force", "0.00981"),
    FormatDescriptor(FormatId.KGFORCE, "Kilogram-force (kgf)", "Force", "1"),
    FormatDescriptor(FormatId.FOOTCANDLE, "Footcandle (fc)", "Illuminance", "46.45"),
    FormatDescriptor(FormatId.PHOT, "Phot (ph)", "Illuminance", "0.05"),
    FormatDescriptor(FormatId.NOX, "Nox (nx)", "Illuminance", "500000"),
    FormatDescriptor(FormatId.FARAD, "Farad (F)", "Capacitance", "0.000001"),
    FormatDescriptor(FormatId.MICROFARAD, "Microfarad (μF)", "Capacitance", "1"),
    FormatDescriptor(FormatId.NANOFARAD, "Nanofarad (nF)", "Capacitance", "1000"),
    FormatDescriptor(FormatId.PICOFARAD, "Picofarad (pF)", "Capacitance", "1000000"),
    FormatDescriptor(FormatId.TERAHERTZ, "Terahertz (THz)", "Frequency", "0.001"),
    FormatDescriptor(FormatId.GIGAHERTZ, "Gigahertz (GHz)", "Frequency", "1"),
    FormatDescriptor(FormatId.PERCENT, "Percent (%)", "Number", "75"),
    FormatDescriptor(FormatId.DECIMAL_FRAC, "Decimal Fraction", "Number", "0.75"),
    FormatDescriptor(FormatId.PPM, "Parts per Million (ppm)", "Number", "750000"),
    FormatDescriptor(FormatId.PPB, "Parts per Billion (ppb)", "Number", "750000000"),
    FormatDescriptor(FormatId.PT_TYPE, "Point (pt)", "Typography", "72"),
    FormatDescriptor(FormatId.SCREEN_PX, "Screen Pixel (96 DPI)", "Typography", "96"),
    FormatDescriptor(FormatId.TWIP, "Twip (1/1440 in)", "Typography", "1440"),
)

_BY_ID: Dict[FormatId, FormatDescriptor] = {descriptor.id: descriptor for descriptor in FORMAT_CATALOG}


def list_formats() -> List[FormatDescriptor]:
    """Get all format descriptors in catalog order."""
    return list(FORMAT_CATALOG)


def describe_format(format_id: Union[str, FormatId]) -> Optional[FormatDescriptor]:
    """
    Look up a format descriptor by id.

    Args:
        format_id: Format id (enum member or its string value)

    Returns:
        The descriptor, or None if the id is unknown
    """
    try:
        key = FormatId.from_string(format_id)
    except NotFoundError:
        return None
    return _BY_ID.get(key)


def groups() -> List[str]:
    """Get the distinct UI group labels in first-seen order."""
    seen: List[str] = []
    for descriptor in FORMAT_CATALOG:
        if descriptor.group not in seen:
            seen.append(descriptor.group)
    return seen
