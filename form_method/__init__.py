from form_method.body import ByteSource, ChunkedBody
from form_method.exceptions import FormMethodError, InvalidMethodError
from form_method.inspector import BODY_PARAM, MAX_LEN, MIN_LEN, parse_method_in_first_field
from form_method.methods import HTTPMethod, Method, parse_method, try_parse_method
from form_method.middleware import FormMethodMiddleware
from form_method.rules import all_of, first_field_method, form_method, is_form_content, is_post

__all__ = [
    "BODY_PARAM",
    "MAX_LEN",
    "MIN_LEN",
    "ByteSource",
    "ChunkedBody",
    "FormMethodError",
    "FormMethodMiddleware",
    "HTTPMethod",
    "InvalidMethodError",
    "Method",
    "all_of",
    "first_field_method",
    "form_method",
    "is_form_content",
    "is_post",
    "parse_method",
    "parse_method_in_first_field",
    "try_parse_method",
]
