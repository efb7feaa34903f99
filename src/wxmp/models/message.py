"""
Inbound message models.

Field aliases are the wire tag names, so a model validates directly from
the ``{tag: text}`` mapping of a callback body.
"""

from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field

QRSCENE_PREFIX = "qrscene_"


class MsgType:
    TEXT = "text"
    IMAGE = "image"
    VOICE = "voice"
    VIDEO = "video"
    SHORT_VIDEO = "shortvideo"
    LOCATION = "location"
    LINK = "link"
    EVENT = "event"


class EventType:
    SUBSCRIBE = "subscribe"
    UNSUBSCRIBE = "unsubscribe"
    SCAN = "SCAN"
    LOCATION = "LOCATION"
    CLICK = "CLICK"
    VIEW = "VIEW"


class EncryptedEnvelope(BaseModel):
    """Inbound encrypted POST body."""
    model_config = ConfigDict(populate_by_name=True)

    to_user: str = Field("", alias="ToUserName")
    encrypt: str = Field(alias="Encrypt")


class MessageHeader(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    to_user: str = Field(alias="ToUserName")
    from_user: str = Field(alias="FromUserName")
    create_time: int = Field(alias="CreateTime")
    msg_type: str = Field(alias="MsgType")
    # De-duplication key; synthesized for events
    msg_id: str = Field("", alias="MsgId")


# --- Content messages ---

class TextMessage(MessageHeader):
    content: str = Field("", alias="Content")


class ImageMessage(MessageHeader):
    pic_url: str = Field("", alias="PicUrl")
    media_id: str = Field("", alias="MediaId")


class VoiceMessage(MessageHeader):
    media_id: str = Field("", alias="MediaId")
    format: str = Field("", alias="Format")


class VideoMessage(MessageHeader):
    media_id: str = Field("", alias="MediaId")
    thumb_media_id: str = Field("", alias="ThumbMediaId")


class ShortVideoMessage(MessageHeader):
    media_id: str = Field("", alias="MediaId")
    thumb_media_id: str = Field("", alias="ThumbMediaId")


class LocationMessage(MessageHeader):
    x: float = Field(0.0, alias="Location_X")
    y: float = Field(0.0, alias="Location_Y")
    scale: int = Field(0, alias="Scale")
    label: str = Field("", alias="Label")


class LinkMessage(MessageHeader):
    title: str = Field("", alias="Title")
    description: str = Field("", alias="Description")
    url: str = Field("", alias="Url")


# --- Events ---

class EventMessage(MessageHeader):
    event: str = Field(alias="Event")


class SubscribeEvent(EventMessage):
    # Set when the user subscribed by scanning a parametric QR code
    event_key: str = Field("", alias="EventKey")
    ticket: str = Field("", alias="Ticket")

    @property
    def scene(self) -> Optional[str]:
        """QR scene value with the ``qrscene_`` prefix removed."""
        if self.event_key.startswith(QRSCENE_PREFIX):
            return self.event_key[len(QRSCENE_PREFIX):]
        return None


class UnsubscribeEvent(EventMessage):
    pass


class ScanEvent(EventMessage):
    """Already-subscribed user scanned a parametric QR code."""
    event_key: str = Field("", alias="EventKey")
    ticket: str = Field("", alias="Ticket")


class LocationReportEvent(EventMessage):
    latitude: float = Field(0.0, alias="Latitude")
    longitude: float = Field(0.0, alias="Longitude")
    precision: float = Field(0.0, alias="Precision")


class MenuClickEvent(EventMessage):
    event_key: str = Field("", alias="EventKey")


class MenuViewEvent(EventMessage):
    # Target URL of the menu entry
    event_key: str = Field("", alias="EventKey")


Message = Union[
    TextMessage, ImageMessage, VoiceMessage, VideoMessage, ShortVideoMessage,
    LocationMessage, LinkMessage,
    SubscribeEvent, UnsubscribeEvent, ScanEvent, LocationReportEvent,
    MenuClickEvent, MenuViewEvent,
]

MESSAGE_TYPES: dict[str, type[MessageHeader]] = {
    MsgType.TEXT: TextMessage,
    MsgType.IMAGE: ImageMessage,
    MsgType.VOICE: VoiceMessage,
    MsgType.VIDEO: VideoMessage,
    MsgType.SHORT_VIDEO: ShortVideoMessage,
    MsgType.LOCATION: LocationMessage,
    MsgType.LINK: LinkMessage,
}

EVENT_TYPES: dict[str, type[EventMessage]] = {
    EventType.SUBSCRIBE: SubscribeEvent,
    EventType.UNSUBSCRIBE: UnsubscribeEvent,
    EventType.SCAN: ScanEvent,
    EventType.LOCATION: LocationReportEvent,
    EventType.CLICK: MenuClickEvent,
    EventType.VIEW: MenuViewEvent,
}
