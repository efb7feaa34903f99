"""
wxmp — WeChat Official Account callback codec for Python.

Signature checks, encrypted-mode envelopes and typed messages/replies for
the server-push callback, plus a small REST client for the custom menu.
"""

from wxmp.config import Config
from wxmp.client import WechatMP
from wxmp.crypto.msgcrypt import KeyMaterial, MsgCrypt
from wxmp.crypto.signature import check_signature, get_signature
from wxmp.dispatcher import DispatchResult, Dispatcher
from wxmp.errors import (
    WxmpError,
    ConfigurationError,
    InvalidKeyMaterial,
    CodecError,
    MalformedEnvelope,
    InvalidCiphertext,
    FrameLengthMismatch,
    AppIdMismatch,
    MalformedMessage,
    UnknownMessageKind,
    UnsupportedReplyType,
    ApiError,
)
from wxmp.models.message import EventType, MessageHeader, MsgType
from wxmp.models.reply import (
    TextReply,
    ImageReply,
    VoiceReply,
    VideoReply,
    MusicReply,
    NewsArticle,
    NewsReply,
)
from wxmp.sessions import SessionStore
from wxmp.transport.envelope import build_reply, parse_message

__version__ = "0.1.0"
__all__ = [
    "Config",
    "WechatMP",
    "KeyMaterial",
    "MsgCrypt",
    "check_signature",
    "get_signature",
    "DispatchResult",
    "Dispatcher",
    "WxmpError",
    "ConfigurationError",
    "InvalidKeyMaterial",
    "CodecError",
    "MalformedEnvelope",
    "InvalidCiphertext",
    "FrameLengthMismatch",
    "AppIdMismatch",
    "MalformedMessage",
    "UnknownMessageKind",
    "UnsupportedReplyType",
    "ApiError",
    "EventType",
    "MessageHeader",
    "MsgType",
    "TextReply",
    "ImageReply",
    "VoiceReply",
    "VideoReply",
    "MusicReply",
    "NewsArticle",
    "NewsReply",
    "SessionStore",
    "build_reply",
    "parse_message",
]
