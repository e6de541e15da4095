"""Tests for the signed session cookie codec."""

import pytest

from joke_board.domain.auth import SessionConfig
from joke_board.services.session_codec import SessionCodec


def test_decode_returns_encoded_payload(codec: SessionCodec) -> None:
    value = codec.encode({"userId": "0b7c1c5e-1f47-4d0c-9a53-6f3d2e6b1a11"})

    assert codec.decode(value) == {"userId": "0b7c1c5e-1f47-4d0c-9a53-6f3d2e6b1a11"}


def test_cookie_value_does_not_change_payload_in_place(codec: SessionCodec) -> None:
    payload = {"userId": "abc"}
    codec.encode(payload)

    assert payload == {"userId": "abc"}


@pytest.mark.parametrize("value", [None, "", "garbage", "a.b.c", "%%%", "é.é"])
def test_decode_rejects_missing_or_garbage_values(
    codec: SessionCodec, value: str | None
) -> None:
    assert codec.decode(value) is None


def test_decode_rejects_truncated_value(codec: SessionCodec) -> None:
    value = codec.encode({"userId": "abc"})

    assert codec.decode(value[:-3]) is None


def test_decode_rejects_tampered_payload(codec: SessionCodec) -> None:
    value = codec.encode({"userId": "abc"})
    forged = SessionCodec(SessionConfig(secrets=("attacker",))).encode(
        {"userId": "admin"}
    )
    forged_payload, _, _ = forged.partition(".")
    _, _, real_signature = value.partition(".")
    flipped = ("A" if value[0] != "A" else "B") + value[1:]

    assert codec.decode(forged) is None
    assert codec.decode(f"{forged_payload}.{real_signature}") is None
    assert codec.decode(flipped) is None


def test_decode_rejects_expired_cookie() -> None:
    expired_codec = SessionCodec(SessionConfig(secrets=("secret",), max_age_seconds=-1))
    value = expired_codec.encode({"userId": "abc"})

    assert expired_codec.decode(value) is None


def test_decode_rejects_non_mapping_payload(codec: SessionCodec) -> None:
    value = codec._serializer.dumps(["userId", "abc"])

    assert codec.decode(value) is None


def test_rotated_secret_still_verifies_old_cookies() -> None:
    old_codec = SessionCodec(SessionConfig(secrets=("old-secret",)))
    value = old_codec.encode({"userId": "abc"})
    rotated_codec = SessionCodec(SessionConfig(secrets=("new-secret", "old-secret")))

    assert rotated_codec.decode(value) == {"userId": "abc"}
    assert old_codec.decode(rotated_codec.encode({"userId": "abc"})) is None


@pytest.mark.parametrize("secrets", [(), ("",)])
def test_codec_requires_a_secret(secrets: tuple[str, ...]) -> None:
    with pytest.raises(ValueError):
        SessionCodec(SessionConfig(secrets=secrets))
