SUPPORTED_RADIXES = (8, 10, 16)

INT32_MIN = -(2 ** 31)
INT32_MAX = 2 ** 31 - 1
UINT32_MASK = 0xFFFFFFFF

HEX_DIGITS = "0123456789ABCDEF"


class RadixError(ValueError):
    pass


class NegativeNumberError(RadixError):
    pass


class InvalidRadixError(RadixError):
    pass


class NumberOutOfRangeError(RadixError):
    pass


def _check_number(number: int) -> None:
    if isinstance(number, bool) or not isinstance(number, int):
        raise TypeError(f"Number must be an integer, got {type(number).__name__}.")
    if not INT32_MIN <= number <= INT32_MAX:
        raise NumberOutOfRangeError(
            f"{number} does not fit in a signed 32-bit integer "
            f"({INT32_MIN}..{INT32_MAX})."
        )


def _check_positive(number: int) -> None:
    _check_number(number)
    if number < 0:
        raise NegativeNumberError("Number is less than zero!")


def _check_radix(radix: int) -> None:
    if isinstance(radix, bool) or not isinstance(radix, int) or radix not in SUPPORTED_RADIXES:
        raise InvalidRadixError(
            f"Only these radixes are supported: {', '.join(map(str, SUPPORTED_RADIXES))}."
        )


def to_unsigned32(number: int) -> int:
    """Reinterpret a signed 32-bit integer as its unsigned bit pattern."""
    _check_number(number)
    return number & UINT32_MASK


def _to_octal(number: int) -> str:
    # Octal digits are accumulated as the decimal digits of `result`,
    # so 8 becomes "10" and 0 becomes "0".
    value = to_unsigned32(number)
    result, weight = 0, 1
    while value != 0:
        result += (value % 8) * weight
        value //= 8
        weight *= 10
    return str(result)


def _to_hex(number: int) -> str:
    # No explicit zero case: 0 yields an empty string.
    value = to_unsigned32(number)
    digits = []
    while value != 0:
        digits.append(HEX_DIGITS[value % 16])
        value //= 16
    return "".join(reversed(digits))


def to_radix(number: int, radix: int) -> str:
    """
    Convert a signed 32-bit integer to a string in base 8, 10 or 16.

    Base 10 keeps the sign. Bases 8 and 16 work on the unsigned 32-bit
    pattern, so -1 becomes "FFFFFFFF" in hex and "37777777777" in octal.
    """
    _check_radix(radix)
    _check_number(number)

    if radix == 8:
        return _to_octal(number)
    if radix == 10:
        return str(number)
    return _to_hex(number)


def to_positive_radix(number: int, radix: int) -> str:
    _check_positive(number)
    return to_radix(number, radix)


def to_positive_octal(number: int) -> str:
    _check_positive(number)
    return to_radix(number, 8)


def to_positive_decimal(number: int) -> str:
    _check_positive(number)
    return to_radix(number, 10)


def to_positive_hex(number: int) -> str:
    _check_positive(number)
    return to_radix(number, 16)
