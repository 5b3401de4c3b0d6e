"""Pydantic field types that store base62 text as bytes or integers.

Example:
    from pydantic import BaseModel
    from base62codec.types import Base62Bytes, Base62Uint64

    class Token(BaseModel):
        secret: Base62Bytes
        serial: Base62Uint64

    token = Token(secret="30B", serial="1ly7vk")
    token.secret  # b'-1'
    token.model_dump_json()  # '{"secret":"30B","serial":"1ly7vk"}'

A custom alphabet is attached with the codec markers:

    MyBytes = Annotated[bytes, Base62BytesCodec(Encoding(my_alphabet))]
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Annotated, Any

from pydantic_core import CoreSchema, core_schema

from base62codec.base62 import MAX_UINT64, Base62Error, Encoding, StdEncoding


class _Base62Codec(ABC):
    """Shared pydantic schema plumbing for the base62 field markers."""

    __slots__ = ("encoding",)

    def __init__(self, encoding: Encoding = StdEncoding) -> None:
        self.encoding = encoding

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.encoding!r})"

    def __hash__(self) -> int:
        return hash((type(self), self.encoding))

    def __eq__(self, other: object) -> bool:
        if type(other) is type(self):
            return self.encoding == other.encoding  # type: ignore[attr-defined]
        return NotImplemented

    @abstractmethod
    def _from_text(self, v: str) -> Any:  # noqa: ANN401
        """Convert base62 text from JSON input to the field value."""

    @abstractmethod
    def _validate(self, v: Any) -> Any:  # noqa: ANN401
        """Convert python input to the field value."""

    @abstractmethod
    def _serialize(self, v: Any) -> str:  # noqa: ANN401
        """Render the field value as base62 text."""

    def __get_pydantic_core_schema__(
        self,
        source_type: Any,  # noqa: ANN401
        handler: Any,  # noqa: ANN401
    ) -> CoreSchema:
        """Validate base62 text on input and emit it again in JSON mode."""
        return core_schema.json_or_python_schema(
            json_schema=core_schema.chain_schema(
                [
                    core_schema.str_schema(),
                    core_schema.no_info_plain_validator_function(self._from_text),
                ]
            ),
            python_schema=core_schema.no_info_plain_validator_function(self._validate),
            serialization=core_schema.plain_serializer_function_ser_schema(
                self._serialize, when_used="json"
            ),
        )


class Base62BytesCodec(_Base62Codec):
    """Marker for a bytes field carried as arbitrary-length base62 text.

    Python input may be bytes (kept as-is) or base62 text; JSON input must be
    text. Text with symbols outside the alphabet is rejected rather than
    decoded to an empty value.
    """

    __slots__ = ()

    def _from_text(self, v: str) -> bytes:
        return self.encoding.decode_strict(v)

    def _validate(self, v: Any) -> bytes:  # noqa: ANN401
        if isinstance(v, str):
            return self._from_text(v)
        if isinstance(v, bytes | bytearray | memoryview):
            return bytes(v)
        raise Base62Error(f"Expected bytes or str, got {type(v).__name__}")

    def _serialize(self, v: bytes) -> str:
        return self.encoding.encode(v)


class Base62Uint64Codec(_Base62Codec):
    """Marker for an unsigned 64-bit int field carried as base62 text."""

    __slots__ = ()

    def _from_text(self, v: str) -> int:
        return self.encoding.decode_uint64(v)

    def _validate(self, v: Any) -> int:  # noqa: ANN401
        if isinstance(v, str):
            return self._from_text(v)
        if isinstance(v, int) and not isinstance(v, bool):
            if not 0 <= v <= MAX_UINT64:
                raise Base62Error(f"Value must be in range [0, 2**64 - 1], got {v}")
            return v
        raise Base62Error(f"Expected int or str, got {type(v).__name__}")

    def _serialize(self, v: int) -> str:
        return self.encoding.encode_uint64(v)


Base62Bytes = Annotated[bytes, Base62BytesCodec()]
Base62Uint64 = Annotated[int, Base62Uint64Codec()]


__all__ = ["Base62Bytes", "Base62BytesCodec", "Base62Uint64", "Base62Uint64Codec"]
