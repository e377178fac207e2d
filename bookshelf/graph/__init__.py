import graphlayer as g
from graphlayer.graphql import executor as graphql_executor

from ..store import EntityStore
from . import authors, books, mutations, root


resolvers = (
    authors.resolvers,
    books.resolvers,
    mutations.resolvers,
    root.resolvers,
)


_graph_definition = g.define_graph(resolvers=resolvers)


def create_graph(*, store):
    return _graph_definition.create_graph(
        {
            EntityStore: store,
        }
    )


Author = authors.Author
Book = books.Book
Mutation = mutations.Mutation
Query = root.Query


_execute = graphql_executor(query_type=Query, mutation_type=Mutation)


def execute(document_text, *, store, variables=None):
    return _execute(document_text, graph=create_graph(store=store), variables=variables)
