import collections

import graphlayer as g
from graphlayer import iterables, schema
from graphlayer.memo import memoize

from ..store import EntityStore


def attr(attr_name):
    return _AttrField(attr_name)


class _AttrField(object):
    def __init__(self, attr_name):
        self._attr_name = attr_name

    def create_reader(self, graph, records, field_query):
        attr_name = self._attr_name

        def read(record):
            return getattr(record, attr_name)

        return read


def join(*, key, resolve):
    """
    Resolve a field by looking up other records.

    ``resolve(graph, field_query, keys)`` is called once for all of the
    records being read, and must return a mapping from each key to the
    value of the field for records with that key.
    """
    return _JoinField(key=key, resolve=resolve)


class _JoinField(object):
    def __init__(self, key, resolve):
        self._key = key
        self._resolve = resolve

    def create_reader(self, graph, records, field_query):
        key = self._key
        keys = _unique(getattr(record, key) for record in records)
        result = self._resolve(graph, field_query, keys)

        def read(record):
            return result[getattr(record, key)]

        return read


def _unique(values):
    return tuple(collections.OrderedDict.fromkeys(values))


class _SingleResultReader(object):
    def __init__(self, query):
        self.element_query = query

    def read_result(self, value):
        if len(value) == 1:
            return value[0]
        else:
            raise g.GraphError("expected exactly one value but got {}".format(len(value)))


class _ManyResultsReader(object):
    def __init__(self, query):
        self.element_query = query.element_query

    def read_result(self, value):
        return value

    def read_results(self, iterable):
        return iterables.to_default_multidict(iterable)


class _FirstOrNullResultReader(object):
    def __init__(self, query):
        self.element_query = query.element_query

    def read_result(self, value):
        if len(value) == 0:
            return None
        else:
            return value[0]

    def read_results(self, iterable):
        result = collections.defaultdict(lambda: None)

        for key, value in iterable:
            if key not in result:
                result[key] = value

        return result


def _result_reader(query):
    if isinstance(query, schema.ObjectQuery):
        return _SingleResultReader(query)
    elif isinstance(query, schema.ListQuery) and isinstance(query.element_query, schema.ObjectQuery):
        return _ManyResultsReader(query)
    elif isinstance(query, schema.NullableQuery) and isinstance(query.element_query, schema.ObjectQuery):
        return _FirstOrNullResultReader(query)
    else:
        raise g.GraphError("unsupported query for records: {}".format(query))


def select(query):
    if isinstance(query, _RecordQuery):
        return query
    else:
        element_query = _result_reader(query).element_query

        return _RecordQuery(
            type=_record_query_type(element_query.type),
            element_query=element_query,
            type_query=query,
            where_field=None,
            where_values=None,
            index_key=None,
        )


class _RecordQueryTypeKey(object):
    def __repr__(self):
        return __name__ + "." + select.__name__


_record_query_type_key = _RecordQueryTypeKey()


def _record_query_type(t):
    return (_record_query_type_key, t)


class _RecordQuery(object):
    def __init__(self, type, element_query, type_query, where_field, where_values, index_key):
        self.type = type
        self.element_query = element_query
        self.type_query = type_query
        self.where_field = where_field
        self.where_values = where_values
        self.index_key = index_key

    def by(self, index_key, index_values):
        return self.index_by(index_key).where(index_key, index_values)

    def index_by(self, index_key):
        return _RecordQuery(
            type=self.type,
            element_query=self.element_query,
            type_query=self.type_query,
            where_field=self.where_field,
            where_values=self.where_values,
            index_key=index_key,
        )

    def where(self, field, values):
        return _RecordQuery(
            type=self.type,
            element_query=self.element_query,
            type_query=self.type_query,
            where_field=field,
            where_values=tuple(values),
            index_key=self.index_key,
        )


def _fetch(collection, field, values):
    if field is None:
        return collection.all()
    elif field == "id":
        return [
            record
            for record in map(collection.find_by_id, values)
            if record is not None
        ]
    else:
        return [
            record
            for value in values
            for record in collection.filter_by_field(field, value)
        ]


def record_resolver(type, collection, fields):
    fields = memoize(fields)

    @g.resolver(_record_query_type(type))
    @g.dependencies(store=EntityStore)
    def resolve_record_query(graph, query, *, store):
        records = _fetch(collection(store), query.where_field, query.where_values)

        build_object = g.create_object_builder(query.element_query)

        for field, record_field in fields().items():
            build_object.field(field)(
                lambda field_query, record_field=record_field:
                    record_field.create_reader(graph, records, field_query)
            )

        result_reader = _result_reader(query.type_query)

        if query.index_key is None:
            return result_reader.read_result([
                build_object(record)
                for record in records
            ])
        else:
            return result_reader.read_results(
                (getattr(record, query.index_key), build_object(record))
                for record in records
            )

    return resolve_record_query
