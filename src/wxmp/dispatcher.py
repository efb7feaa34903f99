"""
Callback dispatcher — the boundary between an HTTP route and the codec.

Flow for a POST: signature check → decrypt (encrypted mode) → parse →
responder → build reply → encrypt (encrypted mode). Codec failures and
responder errors never reach the wire: the platform gets an empty 200 body
instead, so it does not retry the callback.
"""

import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Mapping, Optional

from wxmp.config import Config
from wxmp.crypto.msgcrypt import MsgCrypt
from wxmp.crypto.signature import check_signature
from wxmp.errors import CodecError, UnsupportedReplyType
from wxmp.models.message import Message, MessageHeader
from wxmp.models.reply import Reply
from wxmp.sessions import SessionStore
from wxmp.transport.envelope import build_reply, parse_encrypted_envelope, parse_message

logger = logging.getLogger(__name__)

Responder = Callable[[MessageHeader, Message, Any], Awaitable[Optional[Reply]]]


@dataclass(frozen=True)
class DispatchResult:
    status: int
    body: bytes = b""


OK_EMPTY = DispatchResult(200)
UNAUTHORIZED = DispatchResult(401)


class Dispatcher:
    def __init__(
        self,
        config: Config,
        responder: Responder,
        sessions: Optional[SessionStore[Any]] = None,
    ):
        self._config = config
        self._responder = responder
        self._sessions = sessions
        # Built once; raises InvalidKeyMaterial on a bad key
        self._crypt = MsgCrypt.from_config(config) if config.encrypted else None

    def _authorized(self, query: Mapping[str, str]) -> bool:
        ok = check_signature(
            self._config.token,
            query.get("timestamp", ""),
            query.get("nonce", ""),
            query.get("signature", ""),
        )
        if not ok:
            logger.warning("Rejected request with bad signature")
        return ok

    def handle_handshake(self, query: Mapping[str, str]) -> DispatchResult:
        """Developer URL verification (GET): echo ``echostr`` back."""
        if not self._authorized(query):
            return UNAUTHORIZED
        return DispatchResult(200, query.get("echostr", "").encode("utf-8"))

    async def handle(self, query: Mapping[str, str], body: bytes) -> DispatchResult:
        if not self._authorized(query):
            return UNAUTHORIZED

        try:
            if self._crypt is not None:
                msg_signature = query.get("msg_signature")
                if msg_signature:
                    encrypted = parse_encrypted_envelope(body).encrypt
                    if not check_signature(
                        self._config.token, query.get("timestamp", ""), query.get("nonce", ""),
                        msg_signature, encrypted,
                    ):
                        logger.warning("Rejected request with bad msg_signature")
                        return UNAUTHORIZED
                body = self._crypt.decrypt(body)
            header, message = parse_message(body)
        except CodecError as e:
            logger.warning("Dropping callback: %s (%s)", e, e.code)
            return OK_EMPTY

        logger.debug("Received %s from %s", type(message).__name__, header.from_user)
        session = self._sessions.get_or_create(header.from_user) if self._sessions is not None else None

        try:
            reply = await self._responder(header, message, session)
        except Exception:
            logger.exception("Responder failed for %s from %s", type(message).__name__, header.from_user)
            return OK_EMPTY
        if reply is None:
            return OK_EMPTY

        try:
            payload = build_reply(header, reply)
        except UnsupportedReplyType:
            logger.exception("Responder returned an unsupported reply")
            return OK_EMPTY
        if self._crypt is not None:
            payload = self._crypt.encrypt(payload)
        return DispatchResult(200, payload)
