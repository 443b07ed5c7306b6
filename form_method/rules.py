from __future__ import annotations

import inspect
import typing
from starlette.requests import HTTPConnection, Request

from form_method.inspector import parse_method_in_first_field
from form_method.methods import Method, parse_method

__all__ = ["Rule", "is_post", "is_form_content", "first_field_method", "all_of", "form_method"]

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


class Rule(typing.Protocol):  # pragma: no cover
    """A rule that checks if a request satisfies some condition."""

    def __call__(self, request: Request) -> bool | typing.Awaitable[bool]: ...


def is_post(request: HTTPConnection) -> bool:
    return request.scope.get("method") == "POST"


def is_form_content(request: HTTPConnection) -> bool:
    """Test if Content-Type header is exactly the urlencoded form type, ignoring case."""
    content_type = request.headers.get("content-type")
    return content_type is not None and content_type.lower() == FORM_CONTENT_TYPE


def first_field_method(method: Method) -> Rule:
    """Create a rule that checks the `_method` field at the start of the request body."""

    async def rule(request: Request) -> bool:
        detected = parse_method_in_first_field(await request.body())
        return detected is not None and detected == method

    return rule


def all_of(*rules: Rule) -> Rule:
    """Create a rule that checks if all of the given rules are satisfied, stopping at the first failed one."""

    async def rule(request: Request) -> bool:
        for child in rules:
            result = child(request)
            if inspect.isawaitable(result):
                result = await result
            if not result:
                return False
        return True

    return rule


def form_method(method: Method) -> Rule:
    """
    Create a rule that matches a request with the following criteria:

    - is a `POST` request
    - has a `Content-Type: application/x-www-form-urlencoded` header and body
    - the first field in the form has the name `_method` and a valid HTTP method as the value
    - the value of the `_method` field matches the specified HTTP method

    HTML forms can only be submitted as GET or POST requests, so this rule
    allows for submitting forms using any HTTP method.
    """
    return all_of(is_post, is_form_content, first_field_method(parse_method(method)))
