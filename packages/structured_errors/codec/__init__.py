"""JSON wire codec for structured errors."""

from .errors import DECODE_FAILED_MESSAGE, DecodeError
from .json_codec import decode, decode_dict, encode, encode_dict, encode_str
from .models import ErrorDocument, MetaPairDocument, StacktraceDocument

__all__ = [
    "DECODE_FAILED_MESSAGE",
    "DecodeError",
    "ErrorDocument",
    "MetaPairDocument",
    "StacktraceDocument",
    "decode",
    "decode_dict",
    "encode",
    "encode_dict",
    "encode_str",
]
