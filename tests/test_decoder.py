import zlib

import pytest

from conftest import loose_object
from objviewer.models import (
    DecodeError,
    DecompressionError,
    MalformedHeader,
    ObjectKind,
    RawObject,
    SizeMismatch,
    UnrecognizedKind,
    decode,
    parse_header,
)


class TestDecode:
    def test_blob(self):
        obj = decode(zlib.compress(b"blob 5\0hello"))
        assert obj.kind is ObjectKind.BLOB
        assert obj.declared_size == 5
        assert obj.payload == b"hello"

    @pytest.mark.parametrize("kind", list(ObjectKind))
    def test_known_kinds(self, kind):
        obj = decode(loose_object(kind, b"some payload"))
        assert obj.kind is kind
        assert len(obj.payload) == obj.declared_size == 12

    def test_empty_payload(self):
        obj = decode(zlib.compress(b"tree 0\0"))
        assert obj.kind is ObjectKind.TREE
        assert obj.payload == b""

    def test_payload_may_contain_null_bytes(self):
        payload = b"a\0b\0c"
        obj = decode(loose_object("blob", payload))
        assert obj.payload == payload

    def test_size_mismatch(self):
        with pytest.raises(SizeMismatch) as exc_info:
            decode(zlib.compress(b"blob 4\0hello"))
        assert exc_info.value.declared == 4
        assert exc_info.value.actual == 5

    def test_not_deflate(self):
        with pytest.raises(DecompressionError) as exc_info:
            decode(b"definitely not zlib data")
        assert isinstance(exc_info.value.__cause__, zlib.error)

    def test_truncated_stream(self):
        data = zlib.compress(b"blob 5\0hello")
        with pytest.raises(DecompressionError):
            decode(data[:-4])

    def test_trailing_data_after_stream(self):
        with pytest.raises(DecompressionError, match="trailing"):
            decode(zlib.compress(b"blob 2\0hi") + b"GARBAGE")

    def test_empty_input(self):
        with pytest.raises(DecompressionError):
            decode(b"")

    def test_no_header_terminator(self):
        with pytest.raises(MalformedHeader, match="terminator"):
            decode(zlib.compress(b"blob 5 hello"))

    @pytest.mark.parametrize(
        "header",
        [b"blob5", b"blob five", b"blob -5", b"blob ", b"blob 5 ", b"bl\xffob 5"],
    )
    def test_malformed_header(self, header):
        with pytest.raises(MalformedHeader):
            decode(zlib.compress(header + b"\0hello"))

    @pytest.mark.parametrize("token", ["Blob", "branch", ""])
    def test_unrecognized_kind(self, token):
        with pytest.raises(UnrecognizedKind) as exc_info:
            decode(zlib.compress(f"{token} 5".encode() + b"\0hello"))
        assert exc_info.value.token == token

    def test_errors_are_value_errors(self):
        for exc_type in (DecompressionError, MalformedHeader, SizeMismatch):
            assert issubclass(exc_type, DecodeError)
            assert issubclass(exc_type, ValueError)

    def test_deterministic(self):
        data = loose_object("commit", b"tree 0123\n\nmessage\n")
        assert decode(data) == decode(data)


class TestParseHeader:
    def test_parse(self):
        assert parse_header(b"tag 123") == (ObjectKind.TAG, 123)

    def test_splits_on_first_space(self):
        with pytest.raises(MalformedHeader):
            parse_header(b"blob 1 2")


class TestRawObject:
    def test_size_invariant(self):
        with pytest.raises(SizeMismatch):
            RawObject(kind=ObjectKind.BLOB, declared_size=3, payload=b"ab")

    def test_frozen(self):
        obj = RawObject(kind=ObjectKind.BLOB, declared_size=2, payload=b"ab")
        with pytest.raises(AttributeError):
            obj.payload = b"abc"

    def test_entries_requires_tree(self):
        obj = RawObject(kind=ObjectKind.BLOB, declared_size=2, payload=b"ab")
        with pytest.raises(TypeError):
            obj.entries()
