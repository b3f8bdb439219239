import hashlib
import zlib

import pytest

from objviewer.models import ObjectStore


def tree_entry(mode: str, name: str | bytes, raw_hash: bytes) -> bytes:
    if isinstance(name, str):
        name = name.encode()
    return mode.encode() + b" " + name + b"\0" + raw_hash


def loose_object(kind: str, payload: bytes) -> bytes:
    return zlib.compress(f"{kind} {len(payload)}".encode() + b"\0" + payload)


class StoreBuilder:
    def __init__(self, git_dir):
        self.git_dir = git_dir
        self.store = ObjectStore(git_dir)
        self.store.objects_folder.mkdir(parents=True)

    def write_raw(self, hash_value: str, data: bytes) -> str:
        path = self.store.objects_folder / hash_value[:2] / hash_value[2:]
        path.parent.mkdir(exist_ok=True)
        path.write_bytes(data)
        return hash_value

    def add(self, kind: str, payload: bytes) -> str:
        header = f"{kind} {len(payload)}".encode() + b"\0"
        hash_value = hashlib.sha1(header + payload).hexdigest()
        return self.write_raw(hash_value, zlib.compress(header + payload))


@pytest.fixture
def builder(tmp_path):
    return StoreBuilder(tmp_path / ".git")
