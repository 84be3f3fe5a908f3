"""Message digests."""
from ...domain.configuration import FormattingOptions
from ...domain.converter import DigestConverter
from ...domain.format_ids import FormatId as F
from ...infrastructure.digest import SHA_ALGORITHMS, md5_text
from ..registry import RegistryBuilder


def register(builder: RegistryBuilder, formatting: FormattingOptions) -> None:
    for algorithm in SHA_ALGORITHMS:
        builder.register(F.TEXT, F.from_string(algorithm), DigestConverter(algorithm))
    builder.register(F.TEXT, F.MD5, md5_text)

    # Hash the decoded payload rather than the Base64 text itself.
    builder.register_composed(F.BASE64, F.TEXT, F.SHA256)
    builder.register_composed(F.BASE64, F.TEXT, F.MD5)
