__all__ = [
    "DecodeError",
    "DecompressionError",
    "MalformedHeader",
    "UnrecognizedKind",
    "SizeMismatch",
    "TruncatedTree",
    "InvalidObjectId",
    "ObjectNotFound",
]


class DecodeError(ValueError):
    """Base class for objects that cannot be turned into a RawObject."""


class DecompressionError(DecodeError):
    pass


class MalformedHeader(DecodeError):
    pass


class UnrecognizedKind(MalformedHeader):
    def __init__(self, token: str):
        super().__init__(f"Unrecognized object type: {token!r}")
        self.token = token


class SizeMismatch(DecodeError):
    def __init__(self, declared: int, actual: int):
        super().__init__(f"Size mismatch: declared {declared}, actual {actual}")
        self.declared = declared
        self.actual = actual


class TruncatedTree(DecodeError):
    def __init__(self, offset: int, length: int):
        super().__init__(
            f"Truncated tree entry at offset {offset} of {length} bytes"
        )
        self.offset = offset
        self.length = length


class InvalidObjectId(ValueError):
    pass


class ObjectNotFound(FileNotFoundError):
    def __init__(self, hash_: str, path):
        super().__init__(f"Object file not found for hash: {hash_}")
        self.hash = hash_
        self.path = path
