"""
Turns the filter options a module declares into a single, immutable `Query`.

Every read operation accepts a small set of optional filters (a name prefix,
a namespace, node or plugin identifiers, a resource subtype) and, for the
singleton lookups, a required key. The `QueryBuilder` reads exactly the
declared options from the module parameters, applies their defaults, and
rejects values outside an allow-list before any request is made.
"""

from typing import Any, NamedTuple

from ansible_collections.nomad.cluster.plugins.module_utils.nomad.errors import (
    ValidationError,
)

# Filters with a dedicated slot on the Query. Anything else a resource kind
# declares is carried in `Query.extras`.
QUERY_FIELDS = ("prefix", "namespace", "node_id", "plugin_id", "type")


class FilterSpec(NamedTuple):
    """
    Declares one optional module input.

    Attributes:
        name: The module parameter name.
        api_param: The query-string parameter sent to Nomad. `None` means the
                   input is not sent as a query parameter (e.g. a request body
                   field, or a purely client-side filter).
        default: The value used when the parameter is unset or empty.
        choices: An optional allow-list of accepted values.
        required: Whether the input must be set.
    """

    name: str
    api_param: str | None = None
    default: Any = None
    choices: tuple | None = None
    required: bool = False


class Query(NamedTuple):
    key: str | None = None
    prefix: str | None = None
    namespace: str | None = None
    node_id: str | None = None
    plugin_id: str | None = None
    type: str | None = None
    extras: tuple = ()

    def get(self, name: str, default: Any = None) -> Any:
        """Reads a filter by name, whether it has its own slot or lives in `extras`."""
        if name in QUERY_FIELDS:
            value = getattr(self, name)
            return default if value is None else value
        for extra_name, value in self.extras:
            if extra_name == name:
                return value
        return default


class QueryBuilder:
    """Builds a `Query` from module parameters for one resource kind."""

    def __init__(self, filters=(), key_param: str | None = None):
        self.filters = tuple(filters)
        self.key_param = key_param

    def build(self, params: dict) -> Query:
        """
        Reads the declared filters (and the key, if the kind has one) from the
        module parameters.

        Raises:
            ValidationError: the key is required but missing, or a filter value
                             is not one of its allowed choices.
        """
        key = None
        if self.key_param:
            key = params.get(self.key_param)
            if key is None or key == "":
                raise ValidationError(f"Parameter '{self.key_param}' is required.")

        values = {}
        extras = []
        for spec in self.filters:
            value = params.get(spec.name)
            if value is None or value == "":
                value = spec.default
            if spec.required and (value is None or value == ""):
                raise ValidationError(f"Parameter '{spec.name}' is required.")

            if spec.choices is not None and value is not None and value not in spec.choices:
                raise ValidationError(
                    f"Invalid value '{value}' for '{spec.name}'. "
                    f"Supported values are: {list(spec.choices)}"
                )

            if spec.name in QUERY_FIELDS:
                values[spec.name] = value
            else:
                extras.append((spec.name, value))

        return Query(key=key, extras=tuple(extras), **values)

    def api_params(self, query: Query) -> dict:
        """Renders the query-string parameters for every declared filter that is set."""
        params = {}
        for spec in self.filters:
            if spec.api_param is None:
                continue
            value = query.get(spec.name)
            if value is not None and value != "":
                params[spec.api_param] = value
        return params
