import uuid

from ansible_collections.nomad.cluster.plugins.module_utils.nomad.flattener import (
    lookup,
)

NATURAL = "natural"
ENDPOINT = "endpoint"
UNIQUE = "unique"


class Identity:
    """
    The identity reported for a read, doubling as its existence flag.

    A cleared identity means the resource does not exist; it renders as an
    empty string.
    """

    def __init__(self, value: str | None = None):
        self.value = value or None

    @classmethod
    def cleared(cls) -> "Identity":
        return cls(None)

    @property
    def exists(self) -> bool:
        return self.value is not None

    def __bool__(self) -> bool:
        return self.exists

    def __str__(self) -> str:
        return self.value or ""

    def __eq__(self, other) -> bool:
        if isinstance(other, Identity):
            return self.value == other.value
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.value)

    def __repr__(self) -> str:
        return f"Identity({self.value!r})"


class IdentityAssigner:
    """
    Computes the identity of a read from the resource kind's identity rule.

    - `natural`: the resource's own key (name, ID, accessor ID), falling back
      to the key the caller asked for. A successful read with neither (a
      parsed job without an ID) gets a fresh opaque token instead.
    - `endpoint`: the agent address joined with the API path. Repeated reads
      of the same target get the same identity whatever the content.
    - `unique`: a fresh opaque token on every read.

    An absent resource always gets a cleared identity.
    """

    def __init__(self, address: str):
        self.address = address.rstrip("/")

    def assign(self, kind, outcome, query) -> Identity:
        if outcome.is_absent or not outcome.is_success:
            return Identity.cleared()

        if kind.identity == NATURAL:
            value = lookup(outcome.value, kind.identity_source) if kind.identity_source else None
            natural_key = str(value) if value else query.key
            if natural_key:
                return Identity(natural_key)
            return Identity(uuid.uuid4().hex)
        if kind.identity == ENDPOINT:
            return Identity(f"{self.address}{kind.path}")
        if kind.identity == UNIQUE:
            return Identity(uuid.uuid4().hex)
        raise ValueError(f"Unknown identity rule '{kind.identity}' for {kind.name}.")
