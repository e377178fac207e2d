import graphlayer as g

from . import books, records


Author = g.ObjectType("Author", fields=lambda: (
    g.field("id", type=g.Int),
    g.field("name", type=g.String),
    g.field("books", type=g.ListType(books.Book)),
))


def select_by_id(type_query, ids):
    return records.select(type_query).by("id", ids)


author_resolver = records.record_resolver(
    Author,
    lambda store: store.authors,
    fields=lambda: {
        Author.fields.id: records.attr("id"),
        Author.fields.name: records.attr("name"),
        Author.fields.books: records.join(
            key="id",
            resolve=lambda graph, field_query, ids: graph.resolve(
                books.select_by_author_id(field_query.type_query, author_ids=ids),
            ),
        ),
    },
)


resolvers = (
    author_resolver,
)
