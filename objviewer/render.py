"""Text rendering of decoded objects.

The layout mirrors what users of the object viewer are used to: a header
block with the object type, size and hash, a blank line, then either the
payload as text or one column-aligned line per tree entry.
"""
import logging
import pathlib
from os import PathLike
from typing import Iterable, Iterator

from objviewer.models import (
    ObjectKind,
    ObjectNotFound,
    ObjectStore,
    RawObject,
    TreeEntry,
    decode,
)

__all__ = [
    "format_entry",
    "render_tree",
    "render_object",
    "render_error",
    "render_not_found",
    "summarize",
    "summarize_error",
    "describe",
    "describe_file",
    "browse",
]

logger = logging.getLogger(__name__)


def format_entry(entry: TreeEntry) -> str:
    return f"{entry.mode:<6} {entry.kind:<20} {entry.hash}    {entry.name}"


def render_tree(entries: Iterable[TreeEntry]) -> str:
    return "\n".join(format_entry(entry) for entry in entries)


def render_object(hash_: str, obj: RawObject, *, strict: bool = False) -> str:
    if obj.kind is ObjectKind.TREE:
        content = render_tree(obj.entries(strict=strict))
    else:
        content = obj.payload.decode("utf-8", errors="replace")
    return (
        f"Object Type: {obj.kind}\n"
        f"Size: {obj.declared_size} bytes\n"
        f"Hash: {hash_}\n\n"
        f"{content}"
    )


def render_error(exc: Exception) -> str:
    return f"Error reading object: {exc}"


def render_not_found(hash_: str, path: PathLike | str) -> str:
    return f"Object file not found for hash: {hash_}\nPath: {path}"


def summarize(hash_: str, obj: RawObject) -> str:
    return f"{hash_[2:12]}... ({obj.kind}, {obj.declared_size}b)"


def summarize_error(hash_: str) -> str:
    return f"{hash_[2:]} (Error)"


def describe(
    store: ObjectStore, hash_: str, *, strict: bool = False
) -> tuple[bool, str]:
    """Render the object named by ``hash_``.

    Returns ``(ok, text)``; when the object cannot be read or decoded ``ok``
    is false and ``text`` explains why.
    """
    try:
        return True, render_object(hash_, store.load(hash_), strict=strict)
    except ObjectNotFound as exc:
        return False, render_not_found(hash_, exc.path)
    except (OSError, ValueError) as exc:
        logger.debug("Failed to describe %s", hash_, exc_info=True)
        return False, render_error(exc)


def describe_file(path: PathLike | str, *, strict: bool = False) -> tuple[bool, str]:
    """Same as :func:`describe` for an object file opened by its path."""
    path = pathlib.Path(path)
    hash_ = ObjectStore.hash_from_path(path) or "unknown"
    if not path.is_file():
        return False, render_not_found(hash_, path)
    try:
        with path.open("rb") as f:
            obj = decode(f.read())
        return True, render_object(hash_, obj, strict=strict)
    except (OSError, ValueError) as exc:
        logger.debug("Failed to describe %s", path, exc_info=True)
        return False, render_error(exc)


def browse(store: ObjectStore, prefix: str) -> Iterator[tuple[str, str]]:
    """Yield ``(label, hash)`` for every loose object under ``prefix``.

    Objects that cannot be read or decoded get an error label; they never
    stop the listing.
    """
    for hash_ in store.iter_objects(prefix):
        try:
            label = summarize(hash_, store.load(hash_))
        except (OSError, ValueError) as exc:
            logger.warning("Error parsing %s: %s", hash_, exc)
            label = summarize_error(hash_)
        yield label, hash_
