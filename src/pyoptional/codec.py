"""Encoding and decoding of Optionals with msgspec.

Optionals are tagged structs, so an encoded value records which variant it
is:

    >>> from pyoptional import Optional
    >>> from pyoptional.codec import encode, decode
    >>> encode(Optional.of(42))
    b'{"kind":"present","value":42}'
    >>> encode(Optional.empty())
    b'{"kind":"absent"}'
    >>> decode(b'{"kind":"present","value":42}', int)
    Present(value=42)

Decoders are built once per (value type, format) pair and cached; msgspec
decoders are reentrant, so the cache is shared across threads.

See Also:
    - encode_nullable: the bare `null`-or-value form for interop.
"""

from __future__ import annotations

import functools
from typing import Any, Literal

import msgspec

from pyoptional.types.optional import AbsentType, Optional, Present

__all__ = [
    'Format',
    'decode',
    'encode',
    'encode_nullable',
    'from_builtins',
    'optional_type',
    'to_builtins',
]

type Format = Literal['json', 'msgpack']

_FORMATS = ('json', 'msgpack')


def _check_format(format: str) -> None:  # noqa: A002
    if format not in _FORMATS:
        msg = f"Unknown format '{format}', expected one of {_FORMATS}"
        raise ValueError(msg)


def _check_optional(opt: object) -> None:
    if not isinstance(opt, Optional):
        msg = f'Expected an Optional, got {type(opt).__name__}'
        raise TypeError(msg)


def optional_type(value_type: Any = Any) -> Any:
    """Return the msgspec type describing an Optional holding value_type.

    Example:
        >>> msgspec.json.decode(b'{"kind":"absent"}', type=optional_type(int))
        AbsentType()
    """
    return Present[value_type] | AbsentType


@functools.lru_cache(maxsize=128)
def _decoder(value_type: Any, format: str) -> msgspec.json.Decoder[Any] | msgspec.msgpack.Decoder[Any]:  # noqa: A002
    """Get the cached decoder for an Optional of value_type."""
    if format == 'json':
        return msgspec.json.Decoder(optional_type(value_type))
    return msgspec.msgpack.Decoder(optional_type(value_type))


def encode(opt: Optional[Any], *, format: Format = 'json') -> bytes:  # noqa: A002
    """Encode an Optional to JSON or MessagePack bytes.

    Raises:
        TypeError: If opt is not an Optional.
        ValueError: If format is unknown.
    """
    _check_format(format)
    _check_optional(opt)
    if format == 'json':
        return msgspec.json.encode(opt)
    return msgspec.msgpack.encode(opt)


def decode(data: bytes | str, value_type: Any = Any, *, format: Format = 'json') -> Optional[Any]:  # noqa: A002
    """Decode bytes produced by encode() back into an Optional.

    Args:
        data: The encoded Optional.
        value_type: Expected type of the held value; validated by msgspec.
        format: "json" or "msgpack".

    Returns:
        A Present or the empty Optional.

    Raises:
        msgspec.ValidationError: If the held value does not match value_type,
            or a present value is null.
        msgspec.DecodeError: If data is malformed.
        ValueError: If format is unknown.
    """
    _check_format(format)
    return _decoder(value_type, format).decode(data)


def encode_nullable(opt: Optional[Any], *, format: Format = 'json') -> bytes:  # noqa: A002
    """Encode the held value directly, or null/nil if the Optional is empty.

    Example:
        >>> encode_nullable(Optional.of('v'))
        b'"v"'
        >>> encode_nullable(Optional.empty())
        b'null'
    """
    _check_format(format)
    _check_optional(opt)
    value = opt.or_else(None)
    if format == 'json':
        return msgspec.json.encode(value)
    return msgspec.msgpack.encode(value)


def to_builtins(opt: Optional[Any]) -> dict[str, Any]:
    """Convert an Optional into its builtin dict form.

    Example:
        >>> to_builtins(Optional.of(1))
        {'kind': 'present', 'value': 1}
    """
    _check_optional(opt)
    return msgspec.to_builtins(opt)


def from_builtins(obj: Any, value_type: Any = Any) -> Optional[Any]:
    """Convert the builtin dict form produced by to_builtins() back into an Optional.

    Raises:
        msgspec.ValidationError: If obj is not a valid Optional of value_type.
    """
    return msgspec.convert(obj, optional_type(value_type))
