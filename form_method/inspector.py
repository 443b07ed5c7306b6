from __future__ import annotations

import re

from form_method.body import Buffer, ByteSource, as_byte_source
from form_method.methods import Method, try_parse_method

__all__ = ["BODY_PARAM", "MIN_LEN", "MAX_LEN", "parse_method_in_first_field"]

BODY_PARAM = "_method"

# The minimum length of the `_method` field.
MIN_LEN = len(f"{BODY_PARAM}=GET")

# The maximum length of the `_method` field.
MAX_LEN = len(f"{BODY_PARAM}=DELETE")

_DELIMITERS = re.compile("[=&]")


def parse_method_in_first_field(body: Buffer | ByteSource) -> Method | None:
    """
    Parse a `_method` field containing an HTTP method as the **first** field
    in an `application/x-www-form-urlencoded` body.

    At most MAX_LEN bytes are read from the body. Returns None if the field is
    missing, is not the first one, or its value is not an HTTP method.
    """
    source = as_byte_source(body)
    if source.remaining < MIN_LEN:
        return None

    peek_buffer = bytearray(min(source.remaining, MAX_LEN))
    source.readinto(peek_buffer)

    try:
        text = peek_buffer.decode("utf-8")
    except UnicodeDecodeError:
        return None

    parts = _DELIMITERS.split(text, maxsplit=2)[:2]
    match parts:
        case [name, value] if name == BODY_PARAM:
            return try_parse_method(value)
        case _:
            return None
