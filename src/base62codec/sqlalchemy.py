"""SQLAlchemy integration for base62 values.

Provides TypeDecorators and helpers for storing bytes and unsigned 64-bit
integers as base62 TEXT in the database.

Example:
    from sqlalchemy.orm import DeclarativeBase, Mapped
    from base62codec.sqlalchemy import base62_column

    class Base(DeclarativeBase):
        pass

    class ApiKey(Base):
        __tablename__ = "api_keys"

        serial: Mapped[int] = base62_column(int, primary_key=True)
        secret: Mapped[bytes] = base62_column(bytes)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypedDict, Unpack, cast

from sqlalchemy import Text
from sqlalchemy.orm import mapped_column
from sqlalchemy.types import TypeDecorator

from base62codec.base62 import Encoding, StdEncoding


if TYPE_CHECKING:
    from collections.abc import Callable

    from sqlalchemy.engine import Dialect
    from sqlalchemy.orm import MappedColumn


class Base62ColumnKwargs(TypedDict, total=False):
    """Keyword arguments for base62_column, matching mapped_column's common options."""

    primary_key: bool
    nullable: bool
    default: object
    default_factory: Callable[[], object]
    index: bool
    unique: bool
    insert_default: object
    onupdate: object


class Base62BytesColumn(TypeDecorator[bytes]):
    """SQLAlchemy TypeDecorator for bytes stored as base62 TEXT.

    Args:
        encoding: The alphabet to use, StdEncoding when omitted.
    """

    impl = Text
    cache_ok = True

    def __init__(self, encoding: Encoding | None = None) -> None:
        """Initialize with the column's alphabet."""
        self.encoding = encoding or StdEncoding
        super().__init__()

    def process_bind_param(
        self,
        value: bytes | str | None,
        dialect: Dialect,  # noqa: ARG002
    ) -> str | None:
        """Convert bytes to base62 text for database storage.

        Strings are taken as already encoded and validated before storing.
        """
        if value is None:
            return None
        if isinstance(value, str):
            self.encoding.decode_strict(value)  # Raises InvalidCharacterError if invalid
            return value
        return self.encoding.encode(value)

    def process_result_value(
        self,
        value: str | None,
        dialect: Dialect,  # noqa: ARG002
    ) -> bytes | None:
        """Convert database text back to bytes."""
        if value is None:
            return None
        return self.encoding.decode_strict(value)


class Base62Uint64Column(TypeDecorator[int]):
    """SQLAlchemy TypeDecorator for unsigned 64-bit integers stored as base62 TEXT.

    Useful for values above the signed 64-bit range that most databases
    cannot hold in an integer column. Note that the TEXT ordering does not
    follow numeric order.
    """

    impl = Text
    cache_ok = True

    def __init__(self, encoding: Encoding | None = None) -> None:
        """Initialize with the column's alphabet."""
        self.encoding = encoding or StdEncoding
        super().__init__()

    def process_bind_param(
        self,
        value: int | str | None,
        dialect: Dialect,  # noqa: ARG002
    ) -> str | None:
        """Convert an integer to base62 text for database storage."""
        if value is None:
            return None
        if isinstance(value, str):
            self.encoding.decode_uint64(value)  # Raises Base62Error if invalid
            return value
        return self.encoding.encode_uint64(value)

    def process_result_value(
        self,
        value: str | None,
        dialect: Dialect,  # noqa: ARG002
    ) -> int | None:
        """Convert database text back to an integer."""
        if value is None:
            return None
        return self.encoding.decode_uint64(value)


def _column_type(python_type: type, encoding: Encoding | None) -> TypeDecorator[Any]:
    """Pick the TypeDecorator for a Python value type.

    Raises TypeError for types other than bytes and int.
    """
    if python_type is bytes:
        return Base62BytesColumn(encoding)
    if python_type is int:
        return Base62Uint64Column(encoding)
    raise TypeError(f"base62 columns store bytes or int, got {python_type!r}")


def base62_column(
    python_type: type,
    *,
    encoding: Encoding | None = None,
    **kwargs: Unpack[Base62ColumnKwargs],
) -> MappedColumn[Any]:
    """Create a mapped_column storing bytes or int values as base62 text.

    Args:
        python_type: ``bytes`` for arbitrary byte strings, ``int`` for
            unsigned 64-bit integers.
        encoding: The alphabet to use, StdEncoding when omitted.
        **kwargs: Additional arguments passed to mapped_column.
            Supports: primary_key, nullable, default, default_factory,
            index, unique, insert_default, onupdate.

    Returns:
        A mapped_column configured with the appropriate TypeDecorator.

    Example:
        class Blob(Base):
            __tablename__ = "blobs"

            id: Mapped[int] = base62_column(int, primary_key=True)
            digest: Mapped[bytes | None] = base62_column(bytes, nullable=True)
    """
    return mapped_column(_column_type(python_type, encoding), **kwargs)


class Base62FieldKwargs(TypedDict, total=False):
    """Keyword arguments for base62_field, matching SQLModel Field's common options."""

    default: object
    default_factory: Callable[[], object]
    primary_key: bool
    index: bool
    unique: bool


def base62_field(
    python_type: type,
    *,
    encoding: Encoding | None = None,
    **kwargs: Unpack[Base62FieldKwargs],
) -> Any:  # noqa: ANN401 - return type matches SQLModel's Field
    """Create a SQLModel Field storing bytes or int values as base62 text.

    Example:
        from sqlmodel import SQLModel
        from base62codec.sqlalchemy import base62_field

        class Blob(SQLModel, table=True):
            id: int = base62_field(int, primary_key=True)
            digest: bytes | None = base62_field(bytes, default=None)
    """
    # Import here to avoid hard dependency on sqlmodel
    from sqlmodel import Field

    # SQLModel's sa_type is incorrectly typed as type[Any] but accepts TypeEngine instances.
    sa_type = cast("type[Any]", _column_type(python_type, encoding))
    return Field(sa_type=sa_type, **kwargs)


__all__ = ["Base62BytesColumn", "Base62Uint64Column", "base62_column", "base62_field"]
