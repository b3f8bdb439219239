from typing import Iterator

from objviewer.models.errors import TruncatedTree
from objviewer.models.objects import TreeEntry

__all__ = ["parse_tree"]

SPACE = 0x20
NULL = 0x00
HASH_LENGTH = 20


def parse_tree(payload: bytes, *, strict: bool = False) -> Iterator[TreeEntry]:
    """Yield the entries of a tree payload in order.

    Each entry is ``<mode> <name>\\0<20-byte hash>``. Parsing stops at the
    first entry that cannot be read completely; with ``strict`` the leftover
    bytes raise :class:`TruncatedTree` instead of being dropped.
    """
    offset = 0
    length = len(payload)
    while offset < length:
        space_index = payload.find(SPACE, offset)
        if space_index == -1:
            break
        null_index = payload.find(NULL, space_index + 1)
        if null_index == -1:
            break
        hash_start = null_index + 1
        if hash_start + HASH_LENGTH > length:
            break

        yield TreeEntry(
            raw_mode=payload[offset:space_index],
            raw_name=payload[space_index + 1 : null_index],
            raw_hash=payload[hash_start : hash_start + HASH_LENGTH],
        )
        offset = hash_start + HASH_LENGTH

    if strict and offset < length:
        raise TruncatedTree(offset, length)
