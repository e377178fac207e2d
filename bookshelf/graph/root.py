import graphlayer as g

from . import authors, books, records


Query = g.ObjectType(
    "Query",
    fields=lambda: (
        g.field("book", type=g.NullableType(books.Book), params=(
            g.param("id", type=g.NullableType(g.Int), default=None),
        )),
        g.field("books", type=g.ListType(books.Book)),
        g.field("author", type=g.NullableType(authors.Author), params=(
            g.param("id", type=g.NullableType(g.Int), default=None),
        )),
        g.field("authors", type=g.ListType(authors.Author)),
    ),
)


root_resolver = g.root_object_resolver(Query)


@root_resolver.field(Query.fields.book)
def root_resolve_book(graph, query, args):
    return graph.resolve(records.select(query).where("id", [args.id]))


@root_resolver.field(Query.fields.books)
def root_resolve_books(graph, query, args):
    return graph.resolve(records.select(query))


@root_resolver.field(Query.fields.author)
def root_resolve_author(graph, query, args):
    return graph.resolve(records.select(query).where("id", [args.id]))


@root_resolver.field(Query.fields.authors)
def root_resolve_authors(graph, query, args):
    return graph.resolve(records.select(query))


resolvers = (root_resolver,)
