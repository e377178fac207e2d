from .graph import Author, Book, create_graph, execute, Mutation, Query
from .store import create_store, EntityStore


__all__ = [
    "Author",
    "Book",
    "create_graph",
    "execute",
    "Mutation",
    "Query",

    "create_store",
    "EntityStore",
]
