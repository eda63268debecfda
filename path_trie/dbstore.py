import logging
import os

from dataset import connect

from path_trie.store import BaseStore

log = logging.getLogger(__name__)


class DatabaseStore(BaseStore):
    """A DBMS storage backend for path-trie

    This lets several processes share one set of paths through a central
    DBMS. It uses SQLAlchemy as the database backend.

    Usage:
        Set the PATH_TRIE_DATABASE_URL env var to any db URL supported by SQLAlchemy.
        The default is "sqlite:///path_trie.sqlite".

        $ export PATH_TRIE_DATABASE_URL="sqlite:///path_trie.sqlite"
        $ path-trie --storage-backend path_trie.dbstore.DatabaseStore list

        Optionally you may set the table name by setting PATH_TRIE_DATABASE_TABLE.
        The default is 'path_trie_leaves'

        $ export PATH_TRIE_DATABASE_TABLE="path_trie_leaves"

    See Also:
        * Valid URLs https://docs.sqlalchemy.org/en/14/core/engines.html#database-urls
    """

    default_db_url = "sqlite:///path_trie.sqlite"
    default_db_table = "path_trie_leaves"

    def __init__(self, url=None, table=None):
        super().__init__()
        db_url = url or os.environ.get("PATH_TRIE_DATABASE_URL", self.default_db_url)
        db_table = table or os.environ.get("PATH_TRIE_DATABASE_TABLE", self.default_db_table)
        self.leaves = LeafTable(db_url, table=db_table)
        log.info("Using DatabaseStore as the storage backend")
        log.debug(f"DatabaseStore database url is {db_url}")

    def __repr__(self):
        return f"<DatabaseStore {self.leaves.table.name}>"

    def get_leaves(self):
        return self.leaves.all()

    def set_leaves(self, leaves):
        self.leaves.replace(leaves)

    def clean(self):
        # remove all information stored so far
        self.leaves.clean()


class LeafTable:
    """The leaf paths of a trie, one row each

    How values are stored:

        Leaves are stored in the given table (defaults to 'path_trie_leaves').
        The table has the following columns:

            id: integer (primary key)
            path: text

        Only paths are stored, never payloads, which is the same limitation
        as the binary stream format. Rows keep the order they were written in.

    DB backend:

        The backend is any database supported by SQLAlchemy. To simplify
        implementation this uses the dataset library, which provides a very
        straight-forward way of working with tables created from Python dicts.
    """

    def __init__(self, url, table=None):
        table = table or DatabaseStore.default_db_table
        self.db = connect(url)
        self.table = self.db[table]
        self.table.create_column("path", self.db.types.text)

    def all(self):
        # return every stored leaf path
        return [row["path"] for row in self.table.find(order_by="id")]

    def replace(self, leaves):
        # swap the stored leaves for `leaves` in a single transaction
        rows = [{"path": leaf} for leaf in leaves]
        with self.db as tx:
            table = tx[self.table.name]
            table.delete()
            table.insert_many(rows)

    def clean(self):
        self.table.delete()
