"""Callback signature tests."""

import hashlib
import itertools

from wxmp.crypto.signature import check_signature, get_signature

# sha1("1400000000" + "1437364" + "token123")
EXPECTED = "0a17817fda164d493af3ef95626fd368a1a2d847"


def test_known_signature():
    assert get_signature("token123", "1400000000", "1437364") == EXPECTED


def test_check_signature_accepts_valid():
    assert check_signature("token123", "1400000000", "1437364", EXPECTED) is True


def test_check_signature_rejects_mismatch():
    assert check_signature("token123", "1400000000", "1437365", EXPECTED) is False
    assert check_signature("other", "1400000000", "1437364", EXPECTED) is False
    assert check_signature("token123", "1400000000", "1437364", EXPECTED.upper()) is False
    assert check_signature("token123", "1400000000", "1437364", "") is False


def test_signature_is_order_independent():
    values = ["token123", "1400000000", "1437364", "Y2lwaGVydGV4dA=="]
    expected = hashlib.sha1("".join(sorted(values)).encode()).hexdigest()
    for perm in itertools.permutations(values):
        assert get_signature(*perm) == expected


def test_signature_with_ciphertext_differs():
    plain = get_signature("token123", "1400000000", "1437364")
    with_ct = get_signature("token123", "1400000000", "1437364", "abc")
    assert plain != with_ct
    assert check_signature("token123", "1400000000", "1437364", with_ct, "abc")
    assert not check_signature("token123", "1400000000", "1437364", with_ct)


def test_signature_is_lowercase_hex():
    sig = get_signature("a", "b", "c")
    assert len(sig) == 40
    assert sig == sig.lower()
    int(sig, 16)


def test_non_ascii_candidate_is_rejected():
    assert check_signature("token123", "1400000000", "1437364", "é") is False
    assert check_signature("token123", "1400000000", "1437364", "签名", "abc") is False
