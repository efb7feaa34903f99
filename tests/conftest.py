import pytest

from wxmp.config import Config
from wxmp.crypto.signature import get_signature

# Key bytes 0x00..0x1f; the IV is bytes 0x00..0x0f
AES_KEY = "AAECAwQFBgcICQoLDA0ODxAREhMUFRYXGBkaGxwdHh8"
APP_ID = "wx123"
TOKEN = "token123"

# AES-256-CBC of frame: b"abcdefghijklmnop" | 0x0000000d | b"<xml>hi</xml>" | b"wx123" | 26 x 0x1a
KNOWN_CIPHERTEXT = "ZnOlBYhoWuZLTtzBJSU1bYqOWGa6+pMUl0uB3WP0CmBoXUggfBQuR1U65/lIpdBD5cLPkNhV6pM/Tjy45I25Xw=="
# Same frame with a declared length of 200
OVERLONG_CIPHERTEXT = "ZnOlBYhoWuZLTtzBJSU1bQvZYQlxpJJHcpzEVRo+EAxnNVHM0Ac+8GZPFPqM7SZudz3MgI7ncct0P/d2m02Gfg=="
# Same frame padded with 26 x 0x00
ZERO_PAD_CIPHERTEXT = "ZnOlBYhoWuZLTtzBJSU1bYqOWGa6+pMUl0uB3WP0CmCqq3dgeZ8baIWXqXkBJfnIlw4+L3xBKOMsA3qza1W/LQ=="

TEXT_XML = (
    b"<xml><ToUserName><![CDATA[gh_1]]></ToUserName><FromUserName><![CDATA[u1]]></FromUserName>"
    b"<CreateTime>123</CreateTime><MsgType><![CDATA[text]]></MsgType><Content><![CDATA[hi]]></Content></xml>"
)


def envelope(encrypted: str, to_user: str = "gh_1") -> bytes:
    return (
        f"<xml><ToUserName><![CDATA[{to_user}]]></ToUserName>"
        f"<Encrypt><![CDATA[{encrypted}]]></Encrypt></xml>"
    ).encode("utf-8")


def signed_query(token: str = TOKEN, timestamp: str = "1400000000", nonce: str = "1437364", **extra: str) -> dict:
    query = {
        "timestamp": timestamp,
        "nonce": nonce,
        "signature": get_signature(token, timestamp, nonce),
    }
    query.update(extra)
    return query


@pytest.fixture
def plain_config() -> Config:
    return Config(app_id=APP_ID, app_secret="secret", token=TOKEN)


@pytest.fixture
def encrypted_config() -> Config:
    return Config(app_id=APP_ID, app_secret="secret", token=TOKEN, encoding_aes_key=AES_KEY)
