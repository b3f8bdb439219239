import logging
import pathlib
import re
from os import PathLike
from typing import Iterator

from objviewer.models.decoder import decode
from objviewer.models.errors import InvalidObjectId, ObjectNotFound
from objviewer.models.objects import RawObject

__all__ = ["ObjectStore"]

logger = logging.getLogger(__name__)

HASH_PATTERN = re.compile(r"[0-9a-f]{40}")
FANOUT_PATTERN = re.compile(r"[0-9a-f]{2}")


class ObjectStore:
    """Read-only access to the loose objects of a git directory."""

    def __init__(self, git_dir: PathLike | str = ".git"):
        self.git_folder = pathlib.Path(git_dir)
        self.objects_folder = self.git_folder / "objects"

    def __repr__(self):
        return f"{type(self).__name__}({str(self.git_folder)!r})"

    def object_path(self, hash_: str) -> pathlib.Path:
        if not HASH_PATTERN.fullmatch(hash_):
            raise InvalidObjectId(f"Invalid object hash: {hash_!r}")
        return self.objects_folder / hash_[:2] / hash_[2:]

    def read(self, hash_: str) -> bytes:
        path = self.object_path(hash_)
        logger.debug("Reading object %s from %s", hash_, path)
        try:
            with path.open("rb") as f:
                return f.read()
        except FileNotFoundError:
            raise ObjectNotFound(hash_, path) from None

    def load(self, hash_: str) -> RawObject:
        return decode(self.read(hash_))

    def fanout_dirs(self) -> list[str]:
        if not self.objects_folder.is_dir():
            return []
        return sorted(
            entry.name
            for entry in self.objects_folder.iterdir()
            if entry.is_dir() and FANOUT_PATTERN.fullmatch(entry.name)
        )

    def iter_objects(self, prefix: str) -> Iterator[str]:
        if not FANOUT_PATTERN.fullmatch(prefix):
            raise InvalidObjectId(f"Invalid object prefix: {prefix!r}")
        sub_dir = self.objects_folder / prefix
        if not sub_dir.is_dir():
            return
        for entry in sorted(sub_dir.iterdir()):
            if entry.is_file():
                yield prefix + entry.name

    @staticmethod
    def hash_from_path(path: PathLike | str) -> str | None:
        """Recover ``abcdef...`` from ``.../objects/ab/cdef...``.

        Uses the last ``objects`` component, so a repository that itself lives
        under a directory named ``objects`` still resolves; returns ``None``
        when the two following components do not spell a hash.
        """
        parts = pathlib.PurePath(path).parts
        for index in range(len(parts) - 3, -1, -1):
            if parts[index] == "objects":
                hash_ = parts[index + 1] + parts[index + 2]
                return hash_ if HASH_PATTERN.fullmatch(hash_) else None
        return None
