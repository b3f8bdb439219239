import logging
import zlib

from objviewer.models.errors import (
    DecompressionError,
    MalformedHeader,
    UnrecognizedKind,
)
from objviewer.models.objects import ObjectKind, RawObject

__all__ = ["decode", "parse_header"]

logger = logging.getLogger(__name__)

NULL_BYTE = b"\x00"


def parse_header(header: bytes) -> tuple[ObjectKind, int]:
    """Split a ``<kind> <size>`` header into its typed parts."""
    try:
        text = header.decode("ascii")
    except UnicodeDecodeError as exc:
        raise MalformedHeader(f"Header is not ASCII: {header!r}") from exc

    type_token, sep, size_token = text.partition(" ")
    if not sep:
        raise MalformedHeader(f"No separator in header: {text!r}")
    if not size_token.isdigit():
        raise MalformedHeader(f"Invalid object size: {size_token!r}")
    try:
        kind = ObjectKind(type_token)
    except ValueError:
        raise UnrecognizedKind(type_token) from None
    return kind, int(size_token)


def decode(compressed: bytes) -> RawObject:
    """Decompress a loose object and return its typed representation.

    Raises a :class:`~objviewer.models.errors.DecodeError` subclass when the
    data is not exactly one complete zlib stream, the header is malformed or
    the payload length differs from the declared size.
    """
    decompressor = zlib.decompressobj()
    try:
        data = decompressor.decompress(compressed)
    except zlib.error as exc:
        raise DecompressionError(f"Invalid compressed data: {exc}") from exc
    if not decompressor.eof:
        raise DecompressionError("Invalid compressed data: truncated stream")
    if decompressor.unused_data:
        raise DecompressionError(
            f"Invalid compressed data: {len(decompressor.unused_data)} "
            "trailing bytes after end of stream"
        )

    header, sep, payload = data.partition(NULL_BYTE)
    if not sep:
        raise MalformedHeader("No header terminator")

    kind, size = parse_header(header)
    logger.debug("Decoded header %s %d (%d payload bytes)", kind, size, len(payload))
    return RawObject(kind=kind, declared_size=size, payload=payload)
