from __future__ import annotations

import logging
import typing
from starlette.requests import HTTPConnection
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from form_method.body import ChunkedBody
from form_method.inspector import MAX_LEN, parse_method_in_first_field
from form_method.methods import parse_method
from form_method.rules import is_form_content, is_post

logger = logging.getLogger(__name__)


async def peek_body(receive: Receive, size: int) -> list[Message]:
    """Receive messages until at least `size` body bytes are buffered or the body ends."""
    messages: list[Message] = []
    received = 0
    while received < size:
        message = await receive()
        messages.append(message)
        if message["type"] != "http.request":
            break

        received += len(message.get("body", b""))
        if not message.get("more_body", False):
            break
    return messages


def replay(messages: list[Message], receive: Receive) -> Receive:
    """Return a receive callable that yields buffered messages before reading from the client again."""
    pending = list(messages)

    async def receive_wrapper() -> Message:
        if pending:
            return pending.pop(0)
        return await receive()

    return receive_wrapper


class FormMethodMiddleware:
    """
    Rewrite the request method of a form POST using the `_method` field.

    Only the first field of the body is considered and only the first few
    bytes of the body are read. The application receives the complete body.
    """

    def __init__(self, app: ASGIApp, allowed_methods: typing.Iterable[str] | None = None) -> None:
        self.app = app
        self.allowed_methods: frozenset[str] | None = (
            frozenset(str(parse_method(method)) for method in allowed_methods) if allowed_methods is not None else None
        )

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            return await self.app(scope, receive, send)

        connection = HTTPConnection(scope)
        if is_post(connection) and is_form_content(connection):
            messages = await peek_body(receive, MAX_LEN)
            receive = replay(messages, receive)

            chunks = [message.get("body", b"") for message in messages if message["type"] == "http.request"]
            form_method = parse_method_in_first_field(ChunkedBody(chunks))
            if form_method is not None:
                if self.allowed_methods is None or str(form_method) in self.allowed_methods:
                    logger.debug("Overriding request method POST with %s.", form_method)
                    scope["original_method"] = scope["method"]
                    scope["method"] = str(form_method)
                else:
                    logger.debug("Method %s is not allowed to override POST.", form_method)

        await self.app(scope, receive, send)
