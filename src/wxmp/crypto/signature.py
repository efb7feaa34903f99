"""
Callback signatures.

The platform signs a request by sorting the token, timestamp, nonce and
(for encrypted payloads) the base64 ciphertext, joining them with no
separator and taking the lowercase SHA-1 hex digest.
"""

import hashlib
import hmac
from typing import Optional


def get_signature(token: str, timestamp: str, nonce: str, encrypted: Optional[str] = None) -> str:
    items = [token, timestamp, nonce]
    if encrypted is not None:
        items.append(encrypted)
    items.sort()
    return hashlib.sha1("".join(items).encode("utf-8")).hexdigest()


def check_signature(
    token: str,
    timestamp: str,
    nonce: str,
    signature: str,
    encrypted: Optional[str] = None,
) -> bool:
    """Return True when ``signature`` matches. Never raises on mismatch."""
    if not signature:
        return False
    expected = get_signature(token, timestamp, nonce, encrypted)
    return hmac.compare_digest(expected.encode("ascii"), signature.encode("utf-8", errors="replace"))
