import importlib
import io
import logging
import os

from path_trie import stream
from path_trie.trie import PathTrie

log = logging.getLogger(__name__)


class BaseStore:
    # A store keeps the leaf paths of a trie somewhere and hands them back.
    # Subclasses only deal with lists of leaf paths.

    def get_leaves(self):
        raise NotImplementedError(f"{self}: get_leaves() not implemented")

    def set_leaves(self, leaves):
        raise NotImplementedError(f"{self}: set_leaves() not implemented")

    def clean(self):
        raise NotImplementedError(f"{self}: clean() not implemented")

    def save(self, trie: PathTrie):
        leaves = trie.leaves()
        self.set_leaves(leaves)
        log.info(f"Saved {len(leaves)} leaves to {self}")

    def load(self, trie=None) -> PathTrie:
        leaves = self.get_leaves()
        if trie is None:
            trie = PathTrie()
        trie.restore(leaves)
        log.info(f"Restored {len(leaves)} leaves from {self}")
        return trie


class MemoryStore(BaseStore):
    def __init__(self):
        super().__init__()
        self.data = b""

    def __repr__(self):
        return "<MemoryStore>"

    def get_leaves(self):
        if not self.data:
            return []
        return stream.read_leaves(io.BytesIO(self.data))

    def set_leaves(self, leaves):
        buf = io.BytesIO()
        stream.write_leaves(buf, leaves)
        self.data = buf.getvalue()

    def clean(self):
        self.data = b""


class FileStore(BaseStore):
    default_path = "path_trie.bin"

    def __init__(self, path=None):
        super().__init__()
        self.path = path or self.default_path

    def __repr__(self):
        return f"<FileStore {self.path}>"

    def get_leaves(self):
        if not os.path.exists(self.path):
            # nothing saved yet
            log.debug(f"{self.path} does not exist, starting empty")
            return []
        with open(self.path, "rb") as fh:
            return stream.read_leaves(fh)

    def set_leaves(self, leaves):
        # write next to the target and swap, so a failed write keeps the old file
        tmp_path = self.path + ".tmp"
        try:
            with open(tmp_path, "wb") as fh:
                stream.write_leaves(fh, leaves)
            os.replace(tmp_path, self.path)
        except Exception:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise

    def clean(self):
        if os.path.exists(self.path):
            os.remove(self.path)


def load_storage(options):
    backend = options.get("storage_backend")
    if isinstance(backend, str):
        backend_import = backend.split(".")
        backend_module = ".".join(backend_import[:-1])
        backend_clsname = backend_import[-1]
        if backend_module == "":
            raise AssertionError(f"Unknown backend provided '{backend}'")
        backend = getattr(importlib.import_module(backend_module), backend_clsname)
    elif backend is None:
        backend = FileStore

    log.debug(f"Using {backend.__name__} as the storage backend")
    return backend(**dict(options.get("storage_options") or {}))
