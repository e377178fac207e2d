import logging
import threading


logger = logging.getLogger(__name__)


class AuthorRecord(object):
    def __init__(self, id, name):
        self.id = id
        self.name = name

    def __repr__(self):
        return "AuthorRecord(id={!r}, name={!r})".format(self.id, self.name)


class BookRecord(object):
    def __init__(self, id, name, author_id):
        self.id = id
        self.name = name
        self.author_id = author_id

    def __repr__(self):
        return "BookRecord(id={!r}, name={!r}, author_id={!r})".format(self.id, self.name, self.author_id)


class Collection(object):
    """
    An in-memory, insertion-ordered collection of records with integer ids.

    Ids come from a counter that only ever moves forward, so they stay unique
    regardless of how many records the collection currently holds.
    """

    def __init__(self, name):
        self.name = name
        self._records = []
        self._last_id = 0
        self._lock = threading.Lock()

    def __len__(self):
        return len(self._records)

    def next_id(self):
        with self._lock:
            return self._take_id()

    def _take_id(self):
        self._last_id += 1
        return self._last_id

    def insert(self, record):
        with self._lock:
            self._append(record)

        logger.debug("inserted %r into %s", record, self.name)
        return record

    def add(self, create_record):
        with self._lock:
            record = create_record(self._take_id())
            self._append(record)

        logger.debug("added %r to %s", record, self.name)
        return record

    def _append(self, record):
        self._records.append(record)
        if record.id > self._last_id:
            self._last_id = record.id

    def all(self):
        return tuple(self._records)

    def find_by_id(self, id):
        for record in self.all():
            if record.id == id:
                return record

        return None

    def filter_by_field(self, field, value):
        return [
            record
            for record in self.all()
            if getattr(record, field) == value
        ]


class EntityStore(object):
    def __init__(self):
        self.authors = Collection("authors")
        self.books = Collection("books")

    def add_author(self, *, name):
        return self.authors.add(lambda id: AuthorRecord(id=id, name=name))

    def add_book(self, *, name, author_id):
        return self.books.add(lambda id: BookRecord(id=id, name=name, author_id=author_id))


_seed_authors = (
    (1, "J. K. Rowling"),
    (2, "J. R. R. Tolkien"),
    (3, "Brent Weeks"),
)

_seed_books = (
    (1, "Harry Potter and the Chamber of Secrets", 1),
    (2, "Harry Potter and the Prisoner of Azkaban", 1),
    (3, "Harry Potter and the Goblet of Fire", 1),
    (4, "The Fellowship of the Ring", 2),
    (5, "The Two Towers", 2),
    (6, "The Return of the King", 2),
    (7, "The Way of Shadows", 3),
    (8, "Beyond the Shadows", 3),
)


def create_store(seed=False):
    store = EntityStore()

    if seed:
        for id, name in _seed_authors:
            store.authors.insert(AuthorRecord(id=id, name=name))
        for id, name, author_id in _seed_books:
            store.books.insert(BookRecord(id=id, name=name, author_id=author_id))

        logger.debug("seeded store with %s authors and %s books", len(store.authors), len(store.books))

    return store
