import logging

from path_trie._version import version as __version__  # noqa: F401
from path_trie.trie import Node, PathTrie  # noqa: F401

log = logging.getLogger("path_trie")
log.setLevel(logging.INFO)

handler = logging.StreamHandler()
handler.setFormatter(logging.Formatter("[%(levelname)-.1s %(asctime)s %(name)s] %(message)s"))
logging.root.addHandler(handler)
