"""Invite Codes — tests for pure code generation and expiry.

Tests cover:
    - generated codes match FC- + 8 symbols from the unambiguous alphabet
    - alphabet has 32 symbols and excludes I, O, 0, 1
    - injected chooser drives the code body
    - expiry is exactly ttl hours after issue time
"""

import random
from datetime import datetime, timedelta, timezone

from founders_club.core.invite_codes import (
    CODE_ALPHABET,
    CODE_LENGTH,
    CODE_PREFIX,
    DEFAULT_TTL_HOURS,
    compute_expiry,
    generate_invite_code,
    is_valid_invite_code,
)


def test_alphabet_has_32_unambiguous_symbols():
    assert len(CODE_ALPHABET) == 32
    assert len(set(CODE_ALPHABET)) == 32
    for ambiguous in "IO01":
        assert ambiguous not in CODE_ALPHABET


def test_generated_code_shape():
    for _ in range(200):
        code = generate_invite_code()
        assert code.startswith(CODE_PREFIX)
        assert len(code) == len(CODE_PREFIX) + CODE_LENGTH
        assert is_valid_invite_code(code)


def test_generated_code_uses_injected_chooser():
    rng = random.Random(42)
    first = generate_invite_code(rng.choice)
    rng = random.Random(42)
    assert generate_invite_code(rng.choice) == first


def test_constant_chooser_builds_constant_body():
    assert generate_invite_code(lambda seq: "K") == "FC-KKKKKKKK"


def test_is_valid_invite_code_rejects_ambiguous_characters():
    assert is_valid_invite_code("FC-4K7M9PQT")
    assert not is_valid_invite_code("FC-4K7M9PQO")
    assert not is_valid_invite_code("FC-4K7M9PQ1")
    assert not is_valid_invite_code("FC-4K7M9PQ")
    assert not is_valid_invite_code("XX-4K7M9PQT")
    assert not is_valid_invite_code("fc-4k7m9pqt")


def test_compute_expiry_defaults_to_72_hours():
    issued = datetime(2026, 10, 18, 12, 0, tzinfo=timezone.utc)
    assert DEFAULT_TTL_HOURS == 72
    assert compute_expiry(issued) == issued + timedelta(hours=72)
    assert compute_expiry(issued) == datetime(2026, 10, 21, 12, 0, tzinfo=timezone.utc)


def test_compute_expiry_custom_ttl():
    issued = datetime(2026, 1, 1, tzinfo=timezone.utc)
    assert compute_expiry(issued, 1) == datetime(2026, 1, 1, 1, tzinfo=timezone.utc)
