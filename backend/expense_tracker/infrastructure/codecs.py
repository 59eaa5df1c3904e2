"""BSON Codecs - custom type mapping between Python values and stored BSON.

Invariants:
    - decimal.Decimal is stored as Decimal128 and read back as Decimal (no float rounding)
    - Datetimes are read back timezone-aware (UTC)
"""

from decimal import Decimal

from bson.codec_options import CodecOptions, TypeCodec, TypeRegistry
from bson.decimal128 import Decimal128


class DecimalCodec(TypeCodec):
    python_type = Decimal
    bson_type = Decimal128

    def transform_python(self, value: Decimal) -> Decimal128:
        return Decimal128(value)

    def transform_bson(self, value: Decimal128) -> Decimal:
        return value.to_decimal()


def build_codec_options() -> CodecOptions:
    return CodecOptions(
        tz_aware=True, type_registry=TypeRegistry([DecimalCodec()]),
    )
