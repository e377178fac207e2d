import logging

import graphlayer as g

from ..store import EntityStore
from . import authors, books, records


logger = logging.getLogger(__name__)


Mutation = g.ObjectType(
    "Mutation",
    fields=lambda: (
        g.field("add_book", type=books.Book, params=(
            g.param("name", type=g.String),
            g.param("author_id", type=g.Int),
        )),
        g.field("add_author", type=authors.Author, params=(
            g.param("name", type=g.String),
        )),
    ),
)


mutation_resolver = g.root_object_resolver(Mutation)


@mutation_resolver.field(Mutation.fields.add_book)
@g.dependencies(store=EntityStore)
def resolve_add_book(graph, query, args, *, store):
    # The author is not required to exist: orphaned books resolve a null author.
    book = store.add_book(name=args.name, author_id=args.author_id)
    logger.info("added book %s", book.id)
    return graph.resolve(records.select(query).where("id", [book.id]))


@mutation_resolver.field(Mutation.fields.add_author)
@g.dependencies(store=EntityStore)
def resolve_add_author(graph, query, args, *, store):
    author = store.add_author(name=args.name)
    logger.info("added author %s", author.id)
    return graph.resolve(records.select(query).where("id", [author.id]))


resolvers = (mutation_resolver,)
