"""
Converts Nomad API objects into flat records that Ansible can return as-is.

Each resource kind declares an ordered tuple of `Field` descriptors. A field
names where its value comes from in the API object and how the value is
rendered: copied, turned into text, projected into a one-level map,
serialized to JSON, or normalized as a timestamp. Records produced from the
same field tuple always carry the same keys in the same order; a value the
API omitted is rendered as the zero value of the field's type.

List-valued fields are rendered per field, not by one global rule. An
ordered list keeps the API order, while a record set is an unordered
collection that is deduplicated and sorted so that it compares stably.
"""

import json
import re
from collections.abc import Mapping
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Callable, NamedTuple

from ansible_collections.nomad.cluster.plugins.module_utils.nomad.errors import (
    SerializationError,
)

_FRACTION = re.compile(r"\.(\d+)")


def lookup(obj: Any, source: str | None) -> Any:
    """
    Reads a value from an API object by key or dotted path
    (`SchedulerConfig.PreemptionConfig`). A `None` source returns the whole
    object. Missing keys at any level yield `None`.
    """
    if source is None:
        return obj
    value = obj
    for part in source.split("."):
        if value is None:
            return None
        if isinstance(value, Mapping):
            value = value.get(part)
        else:
            value = getattr(value, part, None)
    return value


# --- Renderers ---


def copy(value):
    return value


def as_text(value) -> str:
    return str(value)


def as_enum_text(value) -> str:
    """Renders an enumerated value (access mode, attachment mode) as its string form."""
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def as_decimal_text(value) -> str:
    """Renders an integer counter as decimal text, e.g. a job version of 3 as "3"."""
    try:
        return str(int(value))
    except (TypeError, ValueError):
        raise SerializationError(f"expected an integer, got {value!r}")


def _trim_decimal(value: float) -> str:
    return f"{value:.9f}".rstrip("0").rstrip(".")


def as_duration_text(value) -> str:
    """
    Renders a duration given in nanoseconds the way Nomad prints durations
    (`1h0m0s`, `90s` as `1m30s`, `500ms`). Text values are kept as they are.
    """
    if isinstance(value, str):
        return value
    try:
        nanos = int(value)
    except (TypeError, ValueError):
        raise SerializationError(f"expected a duration in nanoseconds, got {value!r}")
    if nanos == 0:
        return "0s"
    sign = "-" if nanos < 0 else ""
    nanos = abs(nanos)
    if nanos < 10**9:
        for unit, size in (("ms", 10**6), ("µs", 10**3)):
            if nanos >= size:
                return f"{sign}{_trim_decimal(nanos / size)}{unit}"
        return f"{sign}{nanos}ns"
    hours, rest = divmod(nanos, 3600 * 10**9)
    minutes, rest = divmod(rest, 60 * 10**9)
    seconds = _trim_decimal(rest / 10**9)
    if hours:
        return f"{sign}{hours}h{minutes}m{seconds}s"
    if minutes:
        return f"{sign}{minutes}m{seconds}s"
    return f"{sign}{seconds}s"


def as_ordered_list(value) -> list:
    return list(value)


def as_flat_map(value) -> dict:
    """
    Renders a structured sub-object as a one-level, string-keyed map. Nested
    maps or lists are not supported and raise `SerializationError`.
    """
    if not isinstance(value, Mapping):
        raise SerializationError(f"expected a map, got {type(value).__name__}")
    flat = {}
    for key, item in value.items():
        if isinstance(item, (Mapping, list, tuple, set)):
            raise SerializationError(f"nested value under '{key}' cannot be flattened")
        flat[str(key)] = item
    return flat


def projected_map(mapping: dict, default=None) -> Callable[[Any], dict]:
    """
    Returns a renderer that builds a map with exactly the keys of `mapping`,
    each read from the source key it maps to.
    """

    def render(value) -> dict:
        projected = {}
        for out_key, source_key in mapping.items():
            item = lookup(value, source_key)
            projected[out_key] = default if item is None else item
        return projected

    return render


def as_json_text(sort_keys: bool = True) -> Callable[[Any], str]:
    """
    Returns a renderer that serializes a structure to compact JSON text. Map
    keys are sorted unless `sort_keys` is false, in which case the API order
    is kept.
    """

    def render(value) -> str:
        try:
            return json.dumps(value, sort_keys=sort_keys, separators=(",", ":"))
        except (TypeError, ValueError) as e:
            raise SerializationError(f"cannot encode as JSON: {e}")

    return render


def record_set(mapping: dict) -> Callable[[Any], list]:
    """
    Returns a renderer for an unordered set of single-level records, such as
    the policies linked to an ACL role (`[{"name": "ops"}]`). Duplicates are
    dropped and the records are sorted by their values.
    """

    def render(value) -> list:
        records = {}
        for item in value:
            record = {}
            for out_key, source_key in mapping.items():
                field_value = lookup(item, source_key)
                record[out_key] = "" if field_value is None else field_value
            records[tuple(record.values())] = record
        return [records[key] for key in sorted(records, key=lambda k: tuple(map(str, k)))]

    return render


def as_bool_text(value) -> str:
    """Renders a flag as lowercase text ("true"/"false")."""
    return str(bool(value)).lower()


def as_count(value) -> int:
    """Renders a collection as the number of its entries."""
    try:
        return len(value)
    except TypeError:
        raise SerializationError(f"expected a collection, got {type(value).__name__}")


def omit_zero(render: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """
    Returns a renderer that reports a zero value as empty text instead of
    rendering it. Older agents send 0 for settings they do not know about.
    """

    def wrapped(value):
        if not value:
            return ""
        return render(value)

    return wrapped


def map_of(render: Callable[[Any], Any]) -> Callable[[Any], dict]:
    """Returns a renderer that applies `render` to every value of a map."""

    def wrapped(value) -> dict:
        if not isinstance(value, Mapping):
            raise SerializationError(f"expected a map, got {type(value).__name__}")
        return {str(key): render(item) for key, item in value.items()}

    return wrapped


def keyed_records(key_name: str, mapping: dict) -> Callable[[Any], list]:
    """
    Returns a renderer that turns a map of sub-objects into a list of records
    sorted by map key, the key itself stored under `key_name`.
    """

    def render(value) -> list:
        if not isinstance(value, Mapping):
            raise SerializationError(f"expected a map, got {type(value).__name__}")
        records = []
        for key in sorted(value, key=str):
            record = {key_name: str(key)}
            for out_key, source_key in mapping.items():
                record[out_key] = lookup(value[key], source_key)
            records.append(record)
        return records

    return render


def parse_timestamp(value) -> datetime:
    """
    Parses an RFC 3339 timestamp as returned by Nomad. Fractional seconds are
    truncated to microseconds; a timestamp without an offset is taken as UTC.
    """
    if isinstance(value, datetime):
        parsed = value
    else:
        text = str(value).strip()
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        text = _FRACTION.sub(lambda m: "." + (m.group(1) + "000000")[:6], text, count=1)
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            raise SerializationError(f"invalid timestamp {value!r}")
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def as_utc_timestamp(value) -> str:
    """Renders a timestamp as ISO 8601 text normalized to UTC."""
    return parse_timestamp(value).astimezone(timezone.utc).isoformat()


def as_raw_timestamp(value) -> str:
    """Renders a timestamp exactly as the API returned it."""
    if isinstance(value, datetime):
        return value.isoformat()
    return str(value)


# --- Descriptors ---


class Field(NamedTuple):
    """
    One output field of a resource record.

    Attributes:
        name: The output key.
        source: Key or dotted path in the API object; `None` for the whole object.
        render: Renderer applied to a present value.
        type: Output type. Its zero value (`str()`, `bool()`, ...) stands in
              for a value the API omitted.
        zero: Overrides the zero value of `type` for an omitted value, e.g. a
              map that always carries the same keys. Passed through `type`, so
              every record gets its own copy.
    """

    name: str
    source: str | None
    render: Callable[[Any], Any] = copy
    type: Any = str
    zero: Any = None

    def extract(self, obj: Any) -> Any:
        value = lookup(obj, self.source)
        if value is None:
            return self.type() if self.zero is None else self.type(self.zero)
        try:
            return self.render(value)
        except SerializationError as e:
            raise SerializationError(f"field '{self.name}': {e}")


class Flattener:
    """Flattens API objects into records with a fixed, ordered field set."""

    def __init__(self, fields):
        self.fields = tuple(fields)

    @property
    def field_names(self) -> tuple:
        return tuple(field.name for field in self.fields)

    def flatten(self, obj: Any) -> dict:
        return {field.name: field.extract(obj) for field in self.fields}

    def flatten_all(self, objs) -> list:
        return [self.flatten(obj) for obj in objs or []]


class ScalarFlattener:
    """Flattens API objects into plain values, e.g. a list of namespace names."""

    def __init__(self, field: Field):
        self.field = field

    def flatten(self, obj: Any) -> Any:
        return self.field.extract(obj)

    def flatten_all(self, objs) -> list:
        return [self.flatten(obj) for obj in objs or []]
