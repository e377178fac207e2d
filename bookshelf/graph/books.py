import graphlayer as g

from . import authors, records


Book = g.ObjectType("Book", fields=lambda: (
    g.field("id", type=g.Int),
    g.field("name", type=g.String),
    g.field("author_id", type=g.Int),
    g.field("author", type=g.NullableType(authors.Author)),
))


def select_by_author_id(type_query, author_ids):
    return records.select(type_query).by("author_id", author_ids)


book_resolver = records.record_resolver(
    Book,
    lambda store: store.books,
    fields=lambda: {
        Book.fields.id: records.attr("id"),
        Book.fields.name: records.attr("name"),
        Book.fields.author_id: records.attr("author_id"),
        Book.fields.author: records.join(
            key="author_id",
            resolve=lambda graph, field_query, ids: graph.resolve(
                authors.select_by_id(field_query.type_query, ids=ids),
            ),
        ),
    },
)


resolvers = (
    book_resolver,
)
