from .converter import (
    SUPPORTED_RADIXES,
    InvalidRadixError,
    NegativeNumberError,
    NumberOutOfRangeError,
    RadixError,
    to_positive_decimal,
    to_positive_hex,
    to_positive_octal,
    to_positive_radix,
    to_radix,
    to_unsigned32,
)

__all__ = [
    "SUPPORTED_RADIXES",
    "RadixError",
    "NegativeNumberError",
    "InvalidRadixError",
    "NumberOutOfRangeError",
    "to_radix",
    "to_positive_radix",
    "to_positive_octal",
    "to_positive_decimal",
    "to_positive_hex",
    "to_unsigned32",
]
