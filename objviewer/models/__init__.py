from objviewer.models.decoder import decode, parse_header
from objviewer.models.errors import (
    DecodeError,
    DecompressionError,
    InvalidObjectId,
    MalformedHeader,
    ObjectNotFound,
    SizeMismatch,
    TruncatedTree,
    UnrecognizedKind,
)
from objviewer.models.objects import EntryKind, ObjectKind, RawObject, TreeEntry
from objviewer.models.store import ObjectStore
from objviewer.models.tree import parse_tree

__all__ = [
    "decode",
    "parse_header",
    "parse_tree",
    "EntryKind",
    "ObjectKind",
    "RawObject",
    "TreeEntry",
    "ObjectStore",
    "DecodeError",
    "DecompressionError",
    "InvalidObjectId",
    "MalformedHeader",
    "ObjectNotFound",
    "SizeMismatch",
    "TruncatedTree",
    "UnrecognizedKind",
]
