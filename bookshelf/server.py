import json
import logging

import flask
from graphql.error import format_error, GraphQLError
from graphql.language import ast as graphql_ast, parser as graphql_parser

from . import graph
from .config import Config
from .store import create_store


logger = logging.getLogger(__name__)


def create_app(config=None, store=None):
    if config is None:
        config = Config()

    if store is None:
        store = create_store(seed=config.seed)

    app = flask.Flask(__name__)

    @app.route(config.path, methods=["GET", "POST"])
    def graphql():
        request = flask.request

        if request.method == "GET" and "query" not in request.args:
            if config.graphiql:
                return flask.render_template("graphiql.html", path=config.path)
            else:
                return _error_response("Must provide query string.", status=400)

        try:
            query, variables = _read_request(request)
        except _BadRequest as error:
            return _error_response(str(error), status=400)

        if request.method == "GET" and _is_mutation(query):
            response = _error_response("Can only perform a mutation operation from a POST request.", status=405)
            response.headers["Allow"] = "POST"
            return response

        result = graph.execute(query, store=store, variables=variables)

        if result.errors:
            logger.info("GraphQL request failed: %s", result.errors[0])
            return _json_response(
                {"data": None, "errors": [_format_error(error) for error in result.errors]},
                status=400,
            )
        else:
            return _json_response({"data": result.data}, status=200)

    return app


class _BadRequest(Exception):
    pass


def _read_request(request):
    if request.method == "GET":
        params = request.args
        variables = params.get("variables")
    elif request.mimetype == "application/graphql":
        params = {"query": request.get_data(as_text=True)}
        variables = None
    else:
        params = request.get_json(silent=True)
        if not isinstance(params, dict):
            params = request.form
        variables = params.get("variables")

    query = params.get("query")
    if not isinstance(query, str) or not query:
        raise _BadRequest("Must provide query string.")

    if isinstance(variables, str):
        try:
            variables = json.loads(variables)
        except ValueError:
            raise _BadRequest("Variables are invalid JSON.")

    if variables is not None and not isinstance(variables, dict):
        raise _BadRequest("Variables are invalid JSON.")

    return query, variables or {}


def _is_mutation(query):
    try:
        document_ast = graphql_parser.parse(query)
    except GraphQLError:
        # Syntax errors are reported by the executor.
        return False

    operations = [
        definition
        for definition in document_ast.definitions
        if isinstance(definition, graphql_ast.OperationDefinitionNode)
    ]
    return len(operations) > 0 and operations[0].operation == graphql_ast.OperationType.MUTATION


def _format_error(error):
    if isinstance(error, GraphQLError):
        return format_error(error)
    else:
        return {"message": str(error)}


def _error_response(message, *, status):
    return _json_response({"errors": [{"message": message}]}, status=status)


def _json_response(body, *, status):
    response = flask.jsonify(body)
    response.status_code = status
    return response


def main():
    logging.basicConfig(level=logging.INFO)

    config = Config()
    app = create_app(config=config)

    print("Server running on port {}".format(config.port))
    app.run(host=config.host, port=config.port)
