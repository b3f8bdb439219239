import binascii
from dataclasses import dataclass
from enum import StrEnum, auto

from objviewer.models.errors import SizeMismatch

__all__ = ["ObjectKind", "EntryKind", "RawObject", "TreeEntry"]


class ObjectKind(StrEnum):
    BLOB = auto()
    TREE = auto()
    COMMIT = auto()
    TAG = auto()


class EntryKind(StrEnum):
    TREE = "tree"
    BLOB = "blob"
    EXECUTABLE = "blob (executable)"
    SYMLINK = "symlink"
    SUBMODULE = "commit (submodule)"
    UNKNOWN = "unknown"

    @classmethod
    def from_mode(cls, mode: str) -> "EntryKind":
        match mode:
            case "40000":
                return cls.TREE
            case "100644":
                return cls.BLOB
            case "100755":
                return cls.EXECUTABLE
            case "120000":
                return cls.SYMLINK
            case "160000":
                return cls.SUBMODULE
            case _:
                return cls.UNKNOWN

    @property
    def description(self) -> str:
        match self:
            case EntryKind.TREE:
                return "directory (tree)"
            case EntryKind.BLOB:
                return "regular file (blob)"
            case EntryKind.EXECUTABLE:
                return "executable file (blob)"
            case EntryKind.SYMLINK:
                return "symbolic link"
            case EntryKind.SUBMODULE:
                return "embedded repository (commit reference)"
            case _:
                return "unknown"


@dataclass(frozen=True, kw_only=True)
class RawObject:
    kind: ObjectKind
    declared_size: int
    payload: bytes

    def __post_init__(self):
        if len(self.payload) != self.declared_size:
            raise SizeMismatch(self.declared_size, len(self.payload))

    def entries(self, *, strict: bool = False):
        from objviewer.models.tree import parse_tree

        if self.kind is not ObjectKind.TREE:
            raise TypeError(f"Not a tree object: {self.kind}")
        return parse_tree(self.payload, strict=strict)


@dataclass(frozen=True, kw_only=True)
class TreeEntry:
    raw_mode: bytes
    raw_name: bytes
    raw_hash: bytes

    @property
    def mode(self) -> str:
        return self.raw_mode.decode("ascii", errors="replace")

    @property
    def name(self) -> str:
        return self.raw_name.decode("utf-8", errors="replace")

    @property
    def hash(self) -> str:
        return binascii.hexlify(self.raw_hash).decode()

    @property
    def kind(self) -> EntryKind:
        return EntryKind.from_mode(self.mode)
