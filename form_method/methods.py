from __future__ import annotations

import enum
import re
import typing

from form_method.exceptions import InvalidMethodError

__all__ = ["HTTPMethod", "Method", "is_token", "parse_method", "try_parse_method"]

# tchar from RFC 9110, section 5.6.2
_TOKEN_RE = re.compile(r"[!#$%&'*+\-.^_`|~0-9A-Za-z]+")


class HTTPMethod(enum.StrEnum):
    GET = "GET"
    HEAD = "HEAD"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    CONNECT = "CONNECT"
    OPTIONS = "OPTIONS"
    TRACE = "TRACE"
    PATCH = "PATCH"


Method = typing.Union[HTTPMethod, str]

_STANDARD_METHODS: dict[str, HTTPMethod] = {member.value: member for member in HTTPMethod}


def is_token(value: str) -> bool:
    """Test if value is a non-empty HTTP token."""
    return _TOKEN_RE.fullmatch(value) is not None


def parse_method(value: str) -> Method:
    """
    Parse an HTTP method token.

    Matching is case-sensitive: standard verbs are recognized only in their
    uppercase form, any other valid token is an extension method and is
    returned as is. Raises InvalidMethodError for anything else.
    """
    if method := _STANDARD_METHODS.get(value):
        return method
    if not is_token(value):
        raise InvalidMethodError(value)
    return value


def try_parse_method(value: str) -> Method | None:
    try:
        return parse_method(value)
    except InvalidMethodError:
        return None
