"""
Encrypted-mode envelope codec.

Plaintext frame layout::

    16 random bytes | 4-byte big-endian length L | L bytes of XML | app id

The frame is padded to 32 bytes and encrypted with AES-256-CBC, using the
first 16 key bytes as the IV. There is no MAC: CBC gives confidentiality
only, so tampering with the blocks that hold the app id or the padding is
not detected. The platform mandates this scheme.
"""

import base64
import binascii
import logging
import os
import secrets
import struct
import time
from typing import NamedTuple, Optional, Union

from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from wxmp.config import Config
from wxmp.crypto.padding import pad, unpad
from wxmp.crypto.signature import get_signature
from wxmp.errors import (
    AppIdMismatch,
    FrameLengthMismatch,
    InvalidCiphertext,
    InvalidKeyMaterial,
    MalformedEnvelope,
)
from wxmp.models.reply import EncryptReply
from wxmp.transport.envelope import dump_encrypt_reply, parse_encrypted_envelope

logger = logging.getLogger(__name__)

KEY_SIZE = 32
IV_SIZE = 16
AES_BLOCK_SIZE = 16
RANDOM_SIZE = 16
FRAME_HEADER_SIZE = RANDOM_SIZE + 4


class KeyMaterial(NamedTuple):
    key: bytes
    iv: bytes

    @classmethod
    def from_encoding_aes_key(cls, encoding_aes_key: str) -> "KeyMaterial":
        """Derive key and IV from the 43-character EncodingAESKey."""
        try:
            key = base64.b64decode(encoding_aes_key + "=", validate=True)
        except (binascii.Error, ValueError) as e:
            raise InvalidKeyMaterial(f"EncodingAESKey is not valid base64: {e}")
        if len(key) != KEY_SIZE:
            raise InvalidKeyMaterial(f"EncodingAESKey must decode to {KEY_SIZE} bytes, got {len(key)}")
        return cls(key=key, iv=key[:IV_SIZE])


class Frame(NamedTuple):
    payload: bytes
    app_id: str


class MsgCrypt:
    """Decrypts inbound envelopes and encrypts outbound replies.

    Instances hold only immutable key material and can be shared between
    concurrent requests.
    """

    def __init__(self, token: str, encoding_aes_key: str, app_id: str, strict_app_id: bool = False):
        self._token = token
        self._app_id = app_id
        self._strict_app_id = strict_app_id
        self._keys = KeyMaterial.from_encoding_aes_key(encoding_aes_key)

    @classmethod
    def from_config(cls, config: Config) -> "MsgCrypt":
        if not config.encoding_aes_key:
            raise InvalidKeyMaterial("encoding_aes_key is not configured")
        return cls(config.token, config.encoding_aes_key, config.app_id, config.strict_app_id)

    @property
    def keys(self) -> KeyMaterial:
        return self._keys

    def _cipher(self) -> Cipher:
        return Cipher(algorithms.AES(self._keys.key), modes.CBC(self._keys.iv))

    def open_frame(self, encrypted: str) -> Frame:
        """Base64-decode, decrypt and unframe the ``Encrypt`` field."""
        try:
            ciphertext = base64.b64decode(encrypted, validate=True)
        except (binascii.Error, ValueError) as e:
            raise MalformedEnvelope(f"Encrypt field is not valid base64: {e}")
        if not ciphertext or len(ciphertext) % AES_BLOCK_SIZE:
            raise InvalidCiphertext(
                f"Ciphertext length {len(ciphertext)} is not a multiple of {AES_BLOCK_SIZE}"
            )

        decryptor = self._cipher().decryptor()
        decoded = unpad(decryptor.update(ciphertext) + decryptor.finalize())

        if len(decoded) < FRAME_HEADER_SIZE:
            raise FrameLengthMismatch(f"Frame of {len(decoded)} bytes has no length header")
        (length,) = struct.unpack(">I", decoded[RANDOM_SIZE:FRAME_HEADER_SIZE])
        end = FRAME_HEADER_SIZE + length
        if end > len(decoded):
            raise FrameLengthMismatch(
                f"Frame declares {length} payload bytes but holds {len(decoded) - FRAME_HEADER_SIZE}",
                {"declared": length, "available": len(decoded) - FRAME_HEADER_SIZE},
            )
        app_id = decoded[end:].decode("utf-8", errors="replace")
        return Frame(payload=decoded[FRAME_HEADER_SIZE:end], app_id=app_id)

    def seal_frame(self, payload: bytes) -> str:
        """Frame, pad and encrypt ``payload``; returns base64 ciphertext."""
        frame = b"".join([
            os.urandom(RANDOM_SIZE),
            struct.pack(">I", len(payload)),
            payload,
            self._app_id.encode("utf-8"),
        ])
        encryptor = self._cipher().encryptor()
        ciphertext = encryptor.update(pad(frame)) + encryptor.finalize()
        return base64.b64encode(ciphertext).decode("ascii")

    def decrypt(self, envelope: Union[bytes, str]) -> bytes:
        """Return the plaintext XML carried by an inbound encrypted envelope."""
        encrypted = parse_encrypted_envelope(envelope).encrypt
        frame = self.open_frame(encrypted)
        if frame.app_id != self._app_id:
            if self._strict_app_id:
                raise AppIdMismatch(self._app_id, frame.app_id)
            logger.debug("Frame app id %r differs from configured %r", frame.app_id, self._app_id)
        return frame.payload

    def encrypt_reply(
        self,
        payload: bytes,
        timestamp: Optional[str] = None,
        nonce: Optional[str] = None,
    ) -> EncryptReply:
        encrypted = self.seal_frame(payload)
        timestamp = timestamp or str(int(time.time()))
        nonce = nonce or str(secrets.randbelow(2**31))
        return EncryptReply(
            encrypt=encrypted,
            msg_signature=get_signature(self._token, timestamp, nonce, encrypted),
            timestamp=timestamp,
            nonce=nonce,
        )

    def encrypt(self, payload: bytes, timestamp: Optional[str] = None, nonce: Optional[str] = None) -> bytes:
        """Encrypt a plaintext reply and serialize the outbound envelope."""
        return dump_encrypt_reply(self.encrypt_reply(payload, timestamp, nonce))
