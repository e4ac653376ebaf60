"""Tests for msgspec encoding and decoding of Optionals."""

from __future__ import annotations

from typing import Any

import msgspec
import pytest
from hypothesis import given
from pyoptional import Absent, Optional
from pyoptional.codec import (
    decode,
    encode,
    encode_nullable,
    from_builtins,
    optional_type,
    to_builtins,
)

from tests.strategies import json_values

Nickname = optional_type(str)


class User(msgspec.Struct):
    name: str
    nickname: Nickname


class TestEncode:
    """Tests for encode()."""

    def test_encode_present_json(self) -> None:
        assert encode(Optional.of(42)) == b'{"kind":"present","value":42}'

    def test_encode_absent_json(self) -> None:
        assert encode(Optional.empty()) == b'{"kind":"absent"}'

    def test_encode_msgpack_is_bytes(self) -> None:
        data = encode(Optional.of('v'), format='msgpack')
        assert isinstance(data, bytes)
        assert msgspec.msgpack.decode(data) == {'kind': 'present', 'value': 'v'}

    def test_encode_rejects_non_optional(self) -> None:
        with pytest.raises(TypeError, match='Expected an Optional'):
            encode(42)  # type: ignore[arg-type]

    def test_encode_unknown_format(self) -> None:
        with pytest.raises(ValueError, match='Unknown format'):
            encode(Optional.of(1), format='yaml')  # type: ignore[arg-type]


class TestDecode:
    """Tests for decode()."""

    def test_decode_present(self) -> None:
        assert decode(b'{"kind":"present","value":42}', int) == Optional.of(42)

    def test_decode_absent(self) -> None:
        assert decode(b'{"kind":"absent"}', int) == Absent

    def test_decode_str_input(self) -> None:
        assert decode('{"kind":"present","value":"x"}', str) == Optional.of('x')

    def test_decode_msgpack(self) -> None:
        data = encode(Optional.of([1, 2]), format='msgpack')
        assert decode(data, list[int], format='msgpack') == Optional.of([1, 2])

    def test_decode_wrong_value_type(self) -> None:
        with pytest.raises(msgspec.ValidationError):
            decode(b'{"kind":"present","value":"x"}', int)

    def test_decode_present_null_rejected(self) -> None:
        """A present payload holding null cannot be decoded."""
        with pytest.raises(msgspec.ValidationError):
            decode(b'{"kind":"present","value":null}', int | None)

    def test_decode_unknown_kind(self) -> None:
        with pytest.raises(msgspec.ValidationError):
            decode(b'{"kind":"maybe"}', int)

    def test_decode_malformed(self) -> None:
        with pytest.raises(msgspec.DecodeError):
            decode(b'{not json', int)

    def test_decode_unknown_format(self) -> None:
        with pytest.raises(ValueError, match='Unknown format'):
            decode(b'{}', int, format='xml')  # type: ignore[arg-type]

    @given(json_values)
    def test_json_roundtrip(self, value: Any) -> None:
        opt = Optional.of(value)
        assert decode(encode(opt)) == opt


class TestEncodeNullable:
    """Tests for encode_nullable()."""

    def test_present_encodes_bare_value(self) -> None:
        assert encode_nullable(Optional.of('v')) == b'"v"'

    def test_absent_encodes_null(self) -> None:
        assert encode_nullable(Optional.empty()) == b'null'

    def test_msgpack_nil(self) -> None:
        assert msgspec.msgpack.decode(encode_nullable(Absent, format='msgpack')) is None


class TestBuiltins:
    """Tests for to_builtins() / from_builtins()."""

    def test_to_builtins_present(self) -> None:
        assert to_builtins(Optional.of(1)) == {'kind': 'present', 'value': 1}

    def test_to_builtins_absent(self) -> None:
        assert to_builtins(Absent) == {'kind': 'absent'}

    def test_from_builtins(self) -> None:
        assert from_builtins({'kind': 'present', 'value': 1}, int) == Optional.of(1)
        assert from_builtins({'kind': 'absent'}) == Absent

    def test_from_builtins_invalid(self) -> None:
        with pytest.raises(msgspec.ValidationError):
            from_builtins({'kind': 'present', 'value': 'x'}, int)


class TestOptionalType:
    """Tests for optional_type() used inside larger msgspec schemas."""

    def test_nested_in_struct(self) -> None:
        user = msgspec.json.decode(
            b'{"name":"ada","nickname":{"kind":"absent"}}',
            type=User,
        )
        assert user.nickname == Absent
        assert user.nickname.or_else(user.name) == 'ada'
