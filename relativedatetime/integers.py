"""Conversions between digit strings and ints of any width.

CPython refuses ``int(str)`` and ``str(int)`` beyond
``sys.get_int_max_str_digits()`` digits (4300 by default), so long values are
converted in chunks that stay under that limit.
"""

_CHUNK_DIGITS = 4000
_CHUNK = 10 ** _CHUNK_DIGITS


def digits_to_int(digits):
    value = 0
    for start in range(0, len(digits), _CHUNK_DIGITS):
        chunk = digits[start:start + _CHUNK_DIGITS]
        value = value * 10 ** len(chunk) + int(chunk)
    return value


def int_to_str(value):
    if not isinstance(value, int):
        return str(value)

    sign = "-" if value < 0 else ""
    value = abs(value)
    chunks = []
    while value >= _CHUNK:
        value, low = divmod(value, _CHUNK)
        chunks.append(str(low).zfill(_CHUNK_DIGITS))
    chunks.append(str(value))
    return sign + "".join(reversed(chunks))
