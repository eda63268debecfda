import typing

SEPARATOR = "/"


def strip_trailing(path):
    # "/a/b///" => "/a/b", and "/" or "" => ""
    return path.rstrip(SEPARATOR)


def join_path(parent, segment):
    # join with /, and handle the fact that only root ends with '/'
    if parent.endswith(SEPARATOR):
        return parent + segment
    return parent + SEPARATOR + segment


def next_segment(own_path, path):
    # path is known to start with own_path. Return the segment directly below
    # own_path and whether it is the last component of path.
    # e.g. ("/a", "/a/b/c") => ("b", False), ("/a", "/a/b") => ("b", True)
    rest = path[len(own_path) :].lstrip(SEPARATOR)
    index = rest.find(SEPARATOR)
    if index == -1:
        return rest, True
    return rest[:index], False


def has_empty_segment(path):
    # "/a//b" can be created but never found again, so it is rejected up front
    return SEPARATOR * 2 in path


class Node:
    def __init__(self, segment, full_path, payload=None):
        self.segment: str = segment
        self.full_path: str = full_path
        self.children: typing.Dict[str, Node] = {}
        self.payload = payload

    def __repr__(self):
        return f"<Node {self.full_path!r} children={len(self.children)}>"

    def is_leaf(self) -> bool:
        return len(self.children) == 0

    def prefix(self, action):
        # pre-order: me first, then every subtree. Sibling order is whatever
        # the dict gives us. Iterative, so depth is not bounded by the stack.
        stack = [self]
        while stack:
            node = stack.pop()
            action(node)
            stack.extend(reversed(list(node.children.values())))

    def postfix(self, action):
        # post-order: every subtree first, then me. Reversing a pre-order
        # walk that visits children right to left gives exactly that.
        stack = [self]
        order = []
        while stack:
            node = stack.pop()
            order.append(node)
            stack.extend(node.children.values())
        for node in reversed(order):
            action(node)

    def insert(self, path, payload=None) -> bool:
        # create the node at `path` below me, along with any missing parents
        node = self
        while True:
            if not path.startswith(node.full_path):
                return False
            if path == node.full_path:
                # already exists, keep whatever payload it has
                return False

            segment, last = next_segment(node.full_path, path)
            child = node.children.get(segment)
            if child is None:
                child = Node(segment, join_path(node.full_path, segment))
                node.children[segment] = child
                if last:
                    child.payload = payload
                    return True
            node = child

    def has(self, path) -> bool:
        return self.get(path) is not None

    def get(self, path) -> typing.Optional["Node"]:
        node = self
        while node is not None:
            if path == node.full_path:
                # exact match
                return node
            if not path.startswith(node.full_path):
                return None

            segment, _ = next_segment(node.full_path, path)
            node = node.children.get(segment)
        return None

    def remove(self, path) -> bool:
        # detach the descendant at `path` (and everything under it). I can't
        # remove myself, only my descendants.
        node = self
        while path.startswith(node.full_path):
            segment, _ = next_segment(node.full_path, path)
            child = node.children.get(segment)
            if child is None:
                return False
            if child.full_path == path:
                del node.children[segment]
                return True
            node = child
        return False


class PathTrie:
    """A directory-like set of slash separated paths

    Parents are created on demand, so adding "/usr/bin/bash" also makes
    "/usr" and "/usr/bin" exist. Any node may carry a payload, but only the
    paths of the leaves are kept when the trie is persisted.

    Usage:

        trie = PathTrie()
        trie.insert("/usr/bin/bash", {"mode": 0o755})
        trie.insert("/usr/bin/zsh")

        trie.has("/usr/bin")
        => True

        trie.get("/usr/bin/bash").payload
        => {"mode": 493}

        trie.leaves()
        => ["/usr/bin/bash", "/usr/bin/zsh"]  (in no particular order)

        trie.remove("/usr/bin")
        trie.leaves()
        => ["/usr"]

    Trailing slashes never matter: "/a/b", "/a/b/" and "/a/b///" are the
    same path. The root "/" always exists and cannot be removed.
    """

    def __init__(self, paths=None):
        self.root = Node(SEPARATOR, SEPARATOR)
        for path in paths or ():
            self.insert(path)

    def __repr__(self):
        return f"<PathTrie leaves={len(self.leaves())}>"

    def __contains__(self, path):
        return self.has(path)

    def __getstate__(self):
        # pickle as the list of leaves, same as the persisted stream format
        return {"leaves": self.leaves()}

    def __setstate__(self, state):
        self.restore(state["leaves"])

    def insert(self, path, payload=None) -> bool:
        # returns True if the node was created, False if it already existed
        # or the path is not usable
        path = strip_trailing(path)
        if len(path) == 0 or has_empty_segment(path):
            return False
        return self.root.insert(path, payload)

    def has(self, path) -> bool:
        path = strip_trailing(path)
        if len(path) == 0:
            return True
        return self.root.has(path)

    def get(self, path) -> typing.Optional[Node]:
        path = strip_trailing(path)
        if len(path) == 0:
            return self.root
        return self.root.get(path)

    def remove(self, path) -> bool:
        path = strip_trailing(path)
        if len(path) == 0:
            # the root stays
            return False
        return self.root.remove(path)

    def clear(self):
        self.root = Node(SEPARATOR, SEPARATOR)

    def restore(self, leaves):
        # rebuild from a list of leaf paths, as read back from storage
        self.clear()
        for leaf in leaves:
            self.insert(leaf)

    def prefix(self, action):
        self.root.prefix(action)

    def postfix(self, action):
        self.root.postfix(action)

    def leaves_only(self, action):
        # call action(full_path) for every node without children. The root
        # is not a stored path, so an empty trie has no leaves.
        def visit(node):
            if node.is_leaf() and node is not self.root:
                action(node.full_path)

        self.root.postfix(visit)

    def leaves(self) -> typing.List[str]:
        found = []
        self.leaves_only(found.append)
        return found
