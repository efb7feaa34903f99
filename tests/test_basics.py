"""Basic unit tests for the wxmp package."""

from wxmp import (
    ApiError,
    AppIdMismatch,
    CodecError,
    ConfigurationError,
    Dispatcher,
    EventType,
    FrameLengthMismatch,
    InvalidCiphertext,
    InvalidKeyMaterial,
    MalformedEnvelope,
    MalformedMessage,
    MsgCrypt,
    MsgType,
    UnknownMessageKind,
    UnsupportedReplyType,
    WechatMP,
    WxmpError,
    __version__,
)


def test_version():
    assert __version__ == "0.1.0"


def test_public_exports():
    assert WechatMP is not None
    assert Dispatcher is not None
    assert MsgCrypt is not None


def test_error_hierarchy():
    assert issubclass(ConfigurationError, WxmpError)
    assert issubclass(InvalidKeyMaterial, ConfigurationError)
    for err in (MalformedEnvelope, InvalidCiphertext, FrameLengthMismatch, AppIdMismatch,
                MalformedMessage, UnknownMessageKind):
        assert issubclass(err, CodecError)
    assert issubclass(CodecError, WxmpError)
    assert issubclass(UnsupportedReplyType, WxmpError)
    assert issubclass(UnsupportedReplyType, TypeError)
    assert issubclass(ApiError, WxmpError)


def test_error_attributes():
    err = WxmpError(code="test_code", message="something broke")
    assert err.code == "test_code"
    assert str(err) == "something broke"
    assert err.details is None

    unknown = UnknownMessageKind("fax")
    assert unknown.code == "unknown_message_kind"
    assert unknown.value == "fax"
    assert unknown.details == {"value": "fax"}

    api = ApiError("boom", errcode=40001, errmsg="invalid credential")
    assert api.details == {"errcode": 40001, "errmsg": "invalid credential"}


def test_type_constants():
    assert MsgType.SHORT_VIDEO == "shortvideo"
    assert MsgType.EVENT == "event"
    assert EventType.SCAN == "SCAN"
    assert EventType.CLICK == "CLICK"
