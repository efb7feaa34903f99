"""
wxmp error types.

Codec errors are terminal for the request that raised them; the dispatcher
turns them into an empty response body. Signature mismatches are never
raised, they are reported as ``False``.
"""

from typing import Any, Optional


class WxmpError(Exception):
    def __init__(self, code: str, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.code = code
        self.details = details


class ConfigurationError(WxmpError):
    def __init__(self, message: str, code: str = "configuration_error"):
        super().__init__(code, message)


class InvalidKeyMaterial(ConfigurationError):
    def __init__(self, message: str):
        super().__init__(message, code="invalid_key_material")


class CodecError(WxmpError):
    """Per-request failure while decoding or encoding a callback."""


class MalformedEnvelope(CodecError):
    def __init__(self, message: str):
        super().__init__("malformed_envelope", message)


class InvalidCiphertext(CodecError):
    def __init__(self, message: str):
        super().__init__("invalid_ciphertext", message)


class FrameLengthMismatch(CodecError):
    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__("frame_length_mismatch", message, details)


class AppIdMismatch(CodecError):
    def __init__(self, expected: str, actual: str):
        super().__init__(
            "app_id_mismatch",
            f"Frame belongs to app {actual!r}, expected {expected!r}",
            {"expected": expected, "actual": actual},
        )


class MalformedMessage(CodecError):
    def __init__(self, message: str):
        super().__init__("malformed_message", message)


class UnknownMessageKind(CodecError):
    def __init__(self, value: str):
        super().__init__("unknown_message_kind", f"Unknown message kind: {value!r}", {"value": value})
        self.value = value


class UnsupportedReplyType(WxmpError, TypeError):
    def __init__(self, reply: Any):
        super().__init__(
            "unsupported_reply_type",
            f"Unsupported reply type: {type(reply).__name__}",
            {"type": type(reply).__name__},
        )


class ApiError(WxmpError):
    def __init__(self, message: str, errcode: Optional[int] = None, errmsg: Optional[str] = None):
        super().__init__("api_error", message, {"errcode": errcode, "errmsg": errmsg})
        self.errcode = errcode
        self.errmsg = errmsg
