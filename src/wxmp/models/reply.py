"""
Reply models — the business-logic side of a callback response.

Header fields are not part of a reply; they are filled in from the inbound
message when the reply is built.
"""

from typing import Union

from pydantic import BaseModel


class TextReply(BaseModel):
    content: str


class ImageReply(BaseModel):
    media_id: str


class VoiceReply(BaseModel):
    media_id: str


class VideoReply(BaseModel):
    media_id: str
    title: str = ""
    description: str = ""


class MusicReply(BaseModel):
    thumb_media_id: str
    music_url: str = ""
    hq_music_url: str = ""
    title: str = ""
    description: str = ""


class NewsArticle(BaseModel):
    title: str = ""
    description: str = ""
    pic_url: str = ""
    url: str = ""


class NewsReply(BaseModel):
    articles: list[NewsArticle] = []


Reply = Union[TextReply, ImageReply, VoiceReply, VideoReply, MusicReply, NewsReply]


class EncryptReply(BaseModel):
    """Outbound encrypted envelope."""
    encrypt: str
    msg_signature: str
    timestamp: str
    nonce: str
