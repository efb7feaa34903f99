"""
Wire XML codec: inbound messages, outbound replies and the encrypted
envelopes around them.

Every callback body is a flat ``<xml>`` element whose children carry the
fields. Parsing reads that element once, picks the variant from ``MsgType``
(and ``Event`` for event pushes) and validates the matching model.
"""

import time
import xml.etree.ElementTree as ET
from typing import Any, Callable, Optional, Union

from pydantic import ValidationError

from wxmp.errors import MalformedEnvelope, MalformedMessage, UnknownMessageKind, UnsupportedReplyType
from wxmp.models.message import (
    EVENT_TYPES,
    MESSAGE_TYPES,
    EncryptedEnvelope,
    EventMessage,
    Message,
    MessageHeader,
    MsgType,
)
from wxmp.models.reply import (
    EncryptReply,
    ImageReply,
    MusicReply,
    NewsReply,
    Reply,
    TextReply,
    VideoReply,
    VoiceReply,
)

ROOT_TAG = "xml"


def _read_fields(raw: Union[bytes, str]) -> dict[str, str]:
    """Parse a flat ``<xml>`` body into ``{tag: text}``. Raises ET.ParseError."""
    root = ET.fromstring(raw)
    return {child.tag: child.text or "" for child in root}


def _sub(parent: ET.Element, tag: str, text: Union[str, int]) -> ET.Element:
    el = ET.SubElement(parent, tag)
    el.text = str(text)
    return el


def _to_bytes(root: ET.Element) -> bytes:
    return ET.tostring(root, encoding="unicode").encode("utf-8")


# --- Inbound ---

def parse_message(raw: Union[bytes, str]) -> tuple[MessageHeader, Message]:
    """Decode a plaintext callback body into its header and typed message."""
    try:
        fields = _read_fields(raw)
    except ET.ParseError as e:
        raise MalformedMessage(f"Body is not valid XML: {e}")

    msg_type = fields.get("MsgType", "").strip()
    if not msg_type:
        raise MalformedMessage("MsgType field not found")

    if msg_type == MsgType.EVENT:
        event = fields.get("Event", "").strip()
        model = EVENT_TYPES.get(event)
        if model is None:
            raise UnknownMessageKind(event)
    else:
        model = MESSAGE_TYPES.get(msg_type)
        if model is None:
            raise UnknownMessageKind(msg_type)

    try:
        message = model.model_validate(fields)
    except ValidationError as e:
        raise MalformedMessage(f"Invalid {model.__name__}: {e}")

    if isinstance(message, EventMessage):
        # Events carry no MsgId on the wire
        message.msg_id = f"{message.from_user}{message.create_time}"

    header = MessageHeader(
        to_user=message.to_user,
        from_user=message.from_user,
        create_time=message.create_time,
        msg_type=message.msg_type,
        msg_id=message.msg_id,
    )
    return header, message  # type: ignore[return-value]


def parse_encrypted_envelope(raw: Union[bytes, str]) -> EncryptedEnvelope:
    try:
        fields = _read_fields(raw)
    except ET.ParseError as e:
        raise MalformedEnvelope(f"Envelope is not valid XML: {e}")
    try:
        return EncryptedEnvelope.model_validate(fields)
    except ValidationError:
        raise MalformedEnvelope("Encrypt field not found")


# --- Outbound ---

def _render_text(root: ET.Element, reply: TextReply) -> None:
    _sub(root, "Content", reply.content)


def _render_image(root: ET.Element, reply: ImageReply) -> None:
    _sub(ET.SubElement(root, "Image"), "MediaId", reply.media_id)


def _render_voice(root: ET.Element, reply: VoiceReply) -> None:
    _sub(ET.SubElement(root, "Voice"), "MediaId", reply.media_id)


def _render_video(root: ET.Element, reply: VideoReply) -> None:
    video = ET.SubElement(root, "Video")
    _sub(video, "MediaId", reply.media_id)
    _sub(video, "Title", reply.title)
    _sub(video, "Description", reply.description)


def _render_music(root: ET.Element, reply: MusicReply) -> None:
    music = ET.SubElement(root, "Music")
    _sub(music, "Title", reply.title)
    _sub(music, "Description", reply.description)
    _sub(music, "MusicUrl", reply.music_url)
    _sub(music, "HQMusicUrl", reply.hq_music_url)
    _sub(music, "ThumbMediaId", reply.thumb_media_id)


def _render_news(root: ET.Element, reply: NewsReply) -> None:
    _sub(root, "ArticleCount", len(reply.articles))
    articles = ET.SubElement(root, "Articles")
    for article in reply.articles:
        item = ET.SubElement(articles, "item")
        _sub(item, "Title", article.title)
        _sub(item, "Description", article.description)
        _sub(item, "PicUrl", article.pic_url)
        _sub(item, "Url", article.url)


_RENDERERS: dict[type, tuple[str, Callable[[ET.Element, Any], None]]] = {
    TextReply: ("text", _render_text),
    ImageReply: ("image", _render_image),
    VoiceReply: ("voice", _render_voice),
    VideoReply: ("video", _render_video),
    MusicReply: ("music", _render_music),
    NewsReply: ("news", _render_news),
}


def build_reply(header: MessageHeader, reply: Reply, create_time: Optional[int] = None) -> bytes:
    """Serialize ``reply`` addressed back to the sender of ``header``."""
    try:
        msg_type, render = _RENDERERS[type(reply)]
    except KeyError:
        raise UnsupportedReplyType(reply)

    root = ET.Element(ROOT_TAG)
    _sub(root, "ToUserName", header.from_user)
    _sub(root, "FromUserName", header.to_user)
    _sub(root, "CreateTime", int(time.time()) if create_time is None else create_time)
    _sub(root, "MsgType", msg_type)
    render(root, reply)
    return _to_bytes(root)


def dump_encrypt_reply(reply: EncryptReply) -> bytes:
    root = ET.Element(ROOT_TAG)
    _sub(root, "Encrypt", reply.encrypt)
    _sub(root, "MsgSignature", reply.msg_signature)
    _sub(root, "TimeStamp", reply.timestamp)
    _sub(root, "Nonce", reply.nonce)
    return _to_bytes(root)
