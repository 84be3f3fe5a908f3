"""Color notations."""
from ...domain.configuration import FormattingOptions
from ...domain.format_ids import FormatId as F
from ...infrastructure.colors import color_converter
from ..registry import RegistryBuilder

COLOR_FORMATS = {
    F.COLOR_HEX: "hex",
    F.COLOR_RGB: "rgb",
    F.COLOR_HSL: "hsl",
    F.COLOR_HSV: "hsv",
    F.COLOR_CMYK: "cmyk",
}


def register(builder: RegistryBuilder, formatting: FormattingOptions) -> None:
    for source, source_notation in COLOR_FORMATS.items():
        for target, target_notation in COLOR_FORMATS.items():
            if source != target:
                builder.register(source, target, color_converter(source_notation, target_notation))
