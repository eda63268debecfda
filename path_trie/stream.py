"""Leaf list wire format

A persisted trie is only the list of its leaf paths, laid out as

    int32   leaf_count          (big endian, signed)
    repeat leaf_count times:
        uint16  byte_length     (big endian)
        bytes   leaf_full_path  (utf-8)

Payloads are not stored. Reading back inserts every leaf into a cleared trie,
which brings all of the intermediate nodes back as well. Anything after the
last declared leaf is left in the stream unread.
"""
import io
import logging
import struct

from path_trie.trie import PathTrie

log = logging.getLogger(__name__)

_COUNT = struct.Struct(">i")
_LENGTH = struct.Struct(">H")
MAX_PATH_BYTES = 0xFFFF


class StreamError(IOError):
    pass


class TruncatedStreamError(StreamError):
    pass


class MalformedStreamError(StreamError):
    pass


def _read_exact(fp, size):
    # raw streams may return fewer bytes than asked for, keep reading until
    # the stream runs dry
    chunks = []
    got = 0
    while got < size:
        chunk = fp.read(size - got)
        if not chunk:
            raise TruncatedStreamError(f"Expected {size} bytes but the stream ended after {got}")
        chunks.append(chunk)
        got += len(chunk)
    return b"".join(chunks)


def _encode_leaves(leaves):
    encoded = []
    for leaf in leaves:
        data = leaf.encode("utf-8")
        if len(data) > MAX_PATH_BYTES:
            raise MalformedStreamError(f"Path is too long to store ({len(data)} bytes): {leaf[:64]}...")
        encoded.append(data)
    return encoded


def write_leaves(fp, leaves):
    # every leaf is checked before the first byte goes out, so a bad leaf
    # never leaves fp half written
    encoded = _encode_leaves(leaves)
    fp.write(_COUNT.pack(len(encoded)))
    for data in encoded:
        fp.write(_LENGTH.pack(len(data)))
        fp.write(data)


def read_leaves(fp):
    # read the complete list before anything is done with it, so a broken
    # stream never produces half a trie
    (count,) = _COUNT.unpack(_read_exact(fp, _COUNT.size))
    if count < 0:
        raise MalformedStreamError(f"Negative leaf count {count}")

    leaves = []
    for i in range(count):
        (length,) = _LENGTH.unpack(_read_exact(fp, _LENGTH.size))
        data = _read_exact(fp, length)
        try:
            leaves.append(data.decode("utf-8"))
        except UnicodeDecodeError as err:
            raise MalformedStreamError(f"Leaf {i} is not valid utf-8") from err
    log.debug(f"Read {count} leaves")
    return leaves


def dump(trie, fp):
    write_leaves(fp, trie.leaves())


def dumps(trie) -> bytes:
    buf = io.BytesIO()
    dump(trie, buf)
    return buf.getvalue()


def load(fp, trie=None) -> PathTrie:
    # replace the contents of `trie` (or a new one) with the leaves in fp
    leaves = read_leaves(fp)
    if trie is None:
        trie = PathTrie()
    trie.restore(leaves)
    return trie


def loads(data, trie=None) -> PathTrie:
    return load(io.BytesIO(data), trie)
