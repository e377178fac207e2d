import logging
import threading

from precisely import assert_that, equal_to, has_attrs, is_sequence
import pytest

from bookshelf.store import AuthorRecord, BookRecord, Collection, create_store


class TestCollection(object):
    def test_ids_are_assigned_in_order_starting_from_one(self):
        collection = Collection("authors")

        first = collection.add(lambda id: AuthorRecord(id=id, name="a"))
        second = collection.add(lambda id: AuthorRecord(id=id, name="b"))

        assert_that(first, has_attrs(id=1, name="a"))
        assert_that(second, has_attrs(id=2, name="b"))

    def test_next_id_never_reuses_an_id(self):
        collection = Collection("authors")

        assert_that(collection.next_id(), equal_to(1))
        assert_that(collection.next_id(), equal_to(2))
        assert_that(len(collection), equal_to(0))

    def test_next_id_is_after_largest_inserted_id(self):
        collection = Collection("authors")
        collection.insert(AuthorRecord(id=5, name="a"))
        collection.insert(AuthorRecord(id=2, name="b"))

        record = collection.add(lambda id: AuthorRecord(id=id, name="c"))

        assert_that(record.id, equal_to(6))

    def test_insert_and_add_are_logged(self, caplog):
        collection = Collection("authors")

        with caplog.at_level(logging.DEBUG, logger="bookshelf.store"):
            collection.insert(AuthorRecord(id=1, name="a"))
            collection.add(lambda id: AuthorRecord(id=id, name="b"))

        assert_that(caplog.messages, is_sequence(
            "inserted AuthorRecord(id=1, name='a') into authors",
            "added AuthorRecord(id=2, name='b') to authors",
        ))

    def test_all_returns_records_in_insertion_order(self):
        collection = Collection("authors")
        collection.insert(AuthorRecord(id=2, name="b"))
        collection.insert(AuthorRecord(id=1, name="a"))

        assert_that(collection.all(), is_sequence(
            has_attrs(id=2),
            has_attrs(id=1),
        ))

    def test_all_is_a_snapshot(self):
        collection = Collection("authors")
        collection.insert(AuthorRecord(id=1, name="a"))

        records = collection.all()
        collection.insert(AuthorRecord(id=2, name="b"))

        assert_that(len(records), equal_to(1))

    def test_find_by_id_returns_first_match(self):
        collection = Collection("authors")
        collection.insert(AuthorRecord(id=1, name="a"))
        collection.insert(AuthorRecord(id=1, name="duplicate"))

        assert_that(collection.find_by_id(1), has_attrs(name="a"))

    def test_find_by_id_returns_none_when_there_is_no_match(self):
        collection = Collection("authors")
        collection.insert(AuthorRecord(id=1, name="a"))

        assert collection.find_by_id(2) is None

    def test_filter_by_field_returns_all_matches_in_insertion_order(self):
        collection = Collection("books")
        collection.insert(BookRecord(id=1, name="a", author_id=1))
        collection.insert(BookRecord(id=2, name="b", author_id=2))
        collection.insert(BookRecord(id=3, name="c", author_id=1))

        assert_that(collection.filter_by_field("author_id", 1), is_sequence(
            has_attrs(name="a"),
            has_attrs(name="c"),
        ))

    def test_filter_by_field_returns_empty_list_when_there_are_no_matches(self):
        collection = Collection("books")
        collection.insert(BookRecord(id=1, name="a", author_id=1))

        assert_that(collection.filter_by_field("author_id", 2), equal_to([]))

    def test_concurrent_adds_never_share_an_id(self):
        collection = Collection("books")

        def add_books():
            for _ in range(100):
                collection.add(lambda id: BookRecord(id=id, name="b", author_id=1))

        threads = [threading.Thread(target=add_books) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        ids = [record.id for record in collection.all()]
        assert_that(sorted(ids), equal_to(list(range(1, 801))))


class TestEntityStore(object):
    def test_store_is_empty_by_default(self):
        store = create_store()

        assert_that(store.authors.all(), equal_to(()))
        assert_that(store.books.all(), equal_to(()))

    def test_seeded_store_has_authors_and_books(self):
        store = create_store(seed=True)

        assert_that(len(store.authors), equal_to(3))
        assert_that(len(store.books), equal_to(8))
        assert_that(store.authors.find_by_id(1), has_attrs(name="J. K. Rowling"))
        assert_that(store.books.find_by_id(8), has_attrs(name="Beyond the Shadows", author_id=3))

    def test_seeded_stores_are_independent(self):
        first = create_store(seed=True)
        second = create_store(seed=True)

        first.add_author(name="Ursula K. Le Guin")

        assert_that(len(first.authors), equal_to(4))
        assert_that(len(second.authors), equal_to(3))

    def test_add_book_does_not_require_author_to_exist(self):
        store = create_store()

        book = store.add_book(name="Orphan", author_id=9999)

        assert_that(book, has_attrs(id=1, name="Orphan", author_id=9999))

    @pytest.mark.parametrize("seed, expected_id", [(False, 1), (True, 4)])
    def test_add_author_uses_next_id(self, seed, expected_id):
        store = create_store(seed=seed)

        author = store.add_author(name="Ursula K. Le Guin")

        assert_that(author, has_attrs(id=expected_id, name="Ursula K. Le Guin"))
