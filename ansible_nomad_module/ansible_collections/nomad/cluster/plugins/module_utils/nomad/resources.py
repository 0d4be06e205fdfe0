"""
Descriptors for every Nomad resource kind exposed by the collection.

A `ResourceKind` is the static configuration a module hands to the
`FactsRunner`: which endpoint to call, which filters the module accepts, how
each field of the result is flattened, and how the read's identity is
derived. Kinds differ from one another in two places:

- an ACL token's policies are an ordered list, while the policies linked to
  an ACL role are an unordered set of `{name}` records;
- a single ACL token's `create_time` is normalized to UTC, while the token
  list reports `create_time` exactly as the API returned it.
"""

from collections.abc import Mapping

from ansible_collections.nomad.cluster.plugins.module_utils.nomad.flattener import (
    Field,
    Flattener,
    ScalarFlattener,
    as_bool_text,
    as_count,
    as_decimal_text,
    as_duration_text,
    as_enum_text,
    as_flat_map,
    as_json_text,
    as_ordered_list,
    as_raw_timestamp,
    as_text,
    as_utc_timestamp,
    keyed_records,
    lookup,
    map_of,
    omit_zero,
    projected_map,
    record_set,
)
from ansible_collections.nomad.cluster.plugins.module_utils.nomad.identity import (
    ENDPOINT,
    NATURAL,
    UNIQUE,
)
from ansible_collections.nomad.cluster.plugins.module_utils.nomad.query import (
    FilterSpec,
    QueryBuilder,
)


class ResourceKind:
    """
    Static description of one read operation.

    Args:
        name: Short identifier of the kind (e.g. "acl_policies").
        label: Human-readable name used in log and error messages.
        path: API path; singleton paths contain a `{key}` placeholder.
        fields: Output fields of one record.
        scalar: For collections of plain values, the single field to render
                per item. Mutually exclusive with `fields`.
        collection_field: Output key holding the list of records; `None` for
                          singleton reads.
        key_param: Module parameter holding the singleton's key.
        filters: Optional module inputs (`FilterSpec`).
        selectors: Callables `(items, query) -> items` applied to a collection
                   before it is flattened.
        aggregate: Callable `(items, query) -> items` applied after the
                   selectors. It reduces a collection to a different set of
                   items (one per datacenter, say), so the items it drops
                   are not reported as filtered out.
        identity: Identity rule (`natural`, `endpoint` or `unique`).
        identity_source: API field holding the natural key.
        method: HTTP method.
        body: Callable `query -> dict` building the request body.
    """

    def __init__(
        self,
        name: str,
        label: str,
        path: str,
        fields=(),
        scalar: Field | None = None,
        collection_field: str | None = None,
        key_param: str | None = None,
        filters=(),
        selectors=(),
        aggregate=None,
        identity: str = ENDPOINT,
        identity_source: str | None = None,
        method: str = "GET",
        body=None,
    ):
        if fields and scalar is not None:
            raise ValueError(f"{name}: 'fields' and 'scalar' are mutually exclusive.")
        self.name = name
        self.label = label
        self.path = path
        self.fields = tuple(fields)
        self.scalar = scalar
        self.collection_field = collection_field
        self.key_param = key_param
        self.filters = tuple(filters)
        self.selectors = tuple(selectors)
        self.aggregate = aggregate
        self.identity = identity
        self.identity_source = identity_source
        self.method = method
        self.body = body

    @property
    def is_collection(self) -> bool:
        return self.collection_field is not None

    def query_builder(self) -> QueryBuilder:
        return QueryBuilder(self.filters, key_param=self.key_param)

    def flattener(self):
        if self.scalar is not None:
            return ScalarFlattener(self.scalar)
        return Flattener(self.fields)

    def output_fields(self) -> dict:
        """Maps each output field of this kind to its type."""
        if self.is_collection:
            return {self.collection_field: list}
        return {field.name: field.type for field in self.fields}

    def select(self, items: list, query) -> list:
        for selector in self.selectors:
            items = selector(items, query)
        return items

    def __repr__(self) -> str:
        return f"ResourceKind({self.name!r})"


# --- Selectors ---


def prefix_on(source: str):
    """Keeps only the items whose `source` field starts with the query prefix."""

    def select(items, query):
        if not query.prefix:
            return items
        return [
            item for item in items if str(lookup(item, source) or "").startswith(query.prefix)
        ]

    return select


def _volume_node_ids(volume) -> set:
    node_ids = set()
    if lookup(volume, "NodeID"):
        node_ids.add(lookup(volume, "NodeID"))
    for alloc in lookup(volume, "Allocations") or []:
        if lookup(alloc, "NodeID"):
            node_ids.add(lookup(alloc, "NodeID"))
    for claims in ("ReadAllocs", "WriteAllocs"):
        allocs = lookup(volume, claims)
        if not isinstance(allocs, Mapping):
            continue
        for alloc in allocs.values():
            if lookup(alloc, "NodeID"):
                node_ids.add(lookup(alloc, "NodeID"))
    return node_ids


def volume_on_node(items, query):
    """
    Drops volumes that report their nodes and are not on the queried node.
    Volumes that carry no node information are left to the server-side filter.
    """
    if not query.node_id:
        return items
    selected = []
    for volume in items:
        node_ids = _volume_node_ids(volume)
        if not node_ids or query.node_id in node_ids:
            selected.append(volume)
    return selected


def volume_for_plugin(items, query):
    if not query.plugin_id:
        return items
    return [
        volume
        for volume in items
        if lookup(volume, "PluginID") in (None, "", query.plugin_id)
    ]


def job_parse_body(query) -> dict:
    return {
        "JobHCL": query.get("hcl"),
        "Canonicalize": bool(query.get("canonicalize", False)),
    }


def datacenters_of(nodes, query):
    """
    Reduces a node listing to the sorted, distinct datacenters of its nodes,
    keeping one node per datacenter. Honors the datacenter prefix and, when
    `ignore_down_nodes` is set, skips nodes whose status is "down".
    """
    prefix = query.prefix or ""
    ignore_down = bool(query.get("ignore_down_nodes", False))
    by_datacenter = {}
    for node in nodes:
        datacenter = lookup(node, "Datacenter") or ""
        if ignore_down and lookup(node, "Status") == "down":
            continue
        if not datacenter.startswith(prefix) or datacenter in by_datacenter:
            continue
        by_datacenter[datacenter] = node
    return [by_datacenter[datacenter] for datacenter in sorted(by_datacenter)]


def node_pool_scheduler_config(value) -> dict:
    config = {"scheduler_algorithm": str(lookup(value, "SchedulerAlgorithm") or "")}
    enabled = lookup(value, "MemoryOversubscriptionEnabled")
    if enabled is not None:
        config["memory_oversubscription"] = "enabled" if enabled else "disabled"
    return config


# --- Resource kinds ---

PREFIX = FilterSpec("prefix", api_param="prefix")

POLICY_LINKS = record_set({"name": "Name"})

ACL_POLICIES = ResourceKind(
    name="acl_policies",
    label="ACL policies",
    path="/v1/acl/policies",
    collection_field="policies",
    filters=(PREFIX,),
    selectors=(prefix_on("Name"),),
    fields=(
        Field("name", "Name"),
        Field("description", "Description"),
    ),
)

ACL_POLICY = ResourceKind(
    name="acl_policy",
    label="ACL policy",
    path="/v1/acl/policy/{key}",
    key_param="name",
    identity=NATURAL,
    identity_source="Name",
    fields=(
        Field("description", "Description"),
        Field("rules", "Rules"),
    ),
)

ACL_ROLE = ResourceKind(
    name="acl_role",
    label="ACL role",
    path="/v1/acl/role/{key}",
    key_param="id",
    identity=NATURAL,
    identity_source="ID",
    fields=(
        Field("name", "Name"),
        Field("description", "Description"),
        Field("policies", "Policies", POLICY_LINKS, list),
    ),
)

ACL_ROLES = ResourceKind(
    name="acl_roles",
    label="ACL roles",
    path="/v1/acl/roles",
    collection_field="acl_roles",
    filters=(PREFIX,),
    selectors=(prefix_on("ID"),),
    fields=(
        Field("id", "ID"),
        Field("name", "Name"),
        Field("description", "Description"),
        Field("policies", "Policies", POLICY_LINKS, list),
    ),
)

ACL_TOKEN = ResourceKind(
    name="acl_token",
    label="ACL token",
    path="/v1/acl/token/{key}",
    key_param="accessor_id",
    identity=NATURAL,
    identity_source="AccessorID",
    fields=(
        Field("name", "Name"),
        Field("type", "Type"),
        Field("policies", "Policies", as_ordered_list, list),
        Field("secret_id", "SecretID"),
        Field("global", "Global", type=bool),
        Field("create_time", "CreateTime", as_utc_timestamp),
        Field("roles", "Roles", record_set({"id": "ID", "name": "Name"}), list),
        Field("expiration_ttl", "ExpirationTTL", as_duration_text),
        Field("expiration_time", "ExpirationTime", as_utc_timestamp),
    ),
)

ACL_TOKENS = ResourceKind(
    name="acl_tokens",
    label="ACL tokens",
    path="/v1/acl/tokens",
    collection_field="acl_tokens",
    filters=(PREFIX,),
    selectors=(prefix_on("AccessorID"),),
    fields=(
        Field("accessor_id", "AccessorID"),
        Field("name", "Name"),
        Field("type", "Type"),
        Field("policies", "Policies", as_ordered_list, list),
        Field("global", "Global", type=bool),
        Field("create_time", "CreateTime", as_raw_timestamp),
    ),
)

DEPLOYMENTS = ResourceKind(
    name="deployments",
    label="deployments",
    path="/v1/deployments",
    collection_field="deployments",
    fields=(
        Field("ID", "ID"),
        Field("JobID", "JobID"),
        Field("JobVersion", "JobVersion", as_decimal_text),
        Field("Status", "Status"),
        Field("StatusDescription", "StatusDescription"),
    ),
)

JOB_PARSER = ResourceKind(
    name="job_parser",
    label="job",
    path="/v1/jobs/parse",
    method="POST",
    body=job_parse_body,
    identity=NATURAL,
    identity_source="ID",
    filters=(
        FilterSpec("hcl", required=True),
        FilterSpec("canonicalize", default=False),
    ),
    fields=(Field("json", None, as_json_text(sort_keys=False)),),
)

NAMESPACES = ResourceKind(
    name="namespaces",
    label="namespaces",
    path="/v1/namespaces",
    collection_field="namespaces",
    scalar=Field("name", "Name"),
)

NAMESPACE = ResourceKind(
    name="namespace",
    label="namespace",
    path="/v1/namespace/{key}",
    key_param="name",
    identity=NATURAL,
    identity_source="Name",
    fields=(
        Field("description", "Description"),
        Field("quota", "Quota"),
        Field("meta", "Meta", as_flat_map, dict),
    ),
)

REGIONS = ResourceKind(
    name="regions",
    label="regions",
    path="/v1/regions",
    collection_field="regions",
    scalar=Field("region", None, as_text),
)

SCALING_POLICY = ResourceKind(
    name="scaling_policy",
    label="scaling policy",
    path="/v1/scaling/policy/{key}",
    key_param="id",
    identity=NATURAL,
    identity_source="ID",
    fields=(
        Field("enabled", "Enabled", type=bool),
        Field("type", "Type"),
        Field("min", "Min", type=int),
        Field("max", "Max", type=int),
        Field("policy", "Policy", as_json_text(sort_keys=True)),
        Field("target", "Target", as_flat_map, dict),
    ),
)

SCALING_POLICIES = ResourceKind(
    name="scaling_policies",
    label="scaling policies",
    path="/v1/scaling/policies",
    collection_field="policies",
    filters=(
        FilterSpec("job_id", api_param="job"),
        FilterSpec("type", api_param="type"),
    ),
    fields=(
        Field("id", "ID"),
        Field("enabled", "Enabled", type=bool),
        Field("type", "Type"),
        Field("target", "Target", as_flat_map, dict),
    ),
)

PREEMPTION_FLAGS = {
    "batch_scheduler_enabled": "BatchSchedulerEnabled",
    "service_scheduler_enabled": "ServiceSchedulerEnabled",
    "system_scheduler_enabled": "SystemSchedulerEnabled",
}

SCHEDULER_CONFIG = ResourceKind(
    name="scheduler_config",
    label="scheduler configuration",
    path="/v1/operator/scheduler/configuration",
    identity=UNIQUE,
    fields=(
        Field(
            "memory_oversubscription_enabled",
            "SchedulerConfig.MemoryOversubscriptionEnabled",
            type=bool,
        ),
        Field("scheduler_algorithm", "SchedulerConfig.SchedulerAlgorithm"),
        Field(
            "preemption_config",
            "SchedulerConfig.PreemptionConfig",
            projected_map(PREEMPTION_FLAGS, default=False),
            dict,
            zero=dict.fromkeys(PREEMPTION_FLAGS, False),
        ),
    ),
)

NODE_POOLS = ResourceKind(
    name="node_pools",
    label="node pools",
    path="/v1/node/pools",
    collection_field="node_pools",
    filters=(PREFIX, FilterSpec("filter", api_param="filter")),
    selectors=(prefix_on("Name"),),
    fields=(
        Field("name", "Name"),
        Field("description", "Description"),
        Field("meta", "Meta", as_flat_map, dict),
    ),
)

VOLUMES = ResourceKind(
    name="volumes",
    label="volumes",
    path="/v1/volumes",
    collection_field="volumes",
    filters=(
        FilterSpec("type", api_param="type", default="csi", choices=("csi",)),
        FilterSpec("node_id", api_param="node_id"),
        FilterSpec("plugin_id", api_param="plugin_id"),
        FilterSpec("namespace", api_param="namespace", default="default"),
    ),
    selectors=(volume_on_node, volume_for_plugin),
    fields=(
        Field("ID", "ID"),
        Field("ExternalID", "ExternalID"),
        Field("Namespace", "Namespace"),
        Field("Name", "Name"),
        Field("AccessMode", "AccessMode", as_enum_text),
        Field("AttachmentMode", "AttachmentMode", as_enum_text),
    ),
)

ALLOCATIONS = ResourceKind(
    name="allocations",
    label="allocations",
    path="/v1/allocations",
    collection_field="allocations",
    filters=(
        PREFIX,
        FilterSpec("filter", api_param="filter"),
        FilterSpec("namespace", api_param="namespace"),
    ),
    selectors=(prefix_on("ID"),),
    fields=(
        Field("id", "ID"),
        Field("eval_id", "EvalID"),
        Field("name", "Name"),
        Field("namespace", "Namespace"),
        Field("node_id", "NodeID"),
        Field("node_name", "NodeName"),
        Field("job_id", "JobID"),
        Field("job_type", "JobType"),
        Field("job_version", "JobVersion", type=int),
        Field("task_group", "TaskGroup"),
        Field("desired_status", "DesiredStatus"),
        Field("client_status", "ClientStatus"),
        Field("followup_eval_id", "FollowupEvalID"),
        Field("next_allocation", "NextAllocation"),
        Field("preempted_by_allocation", "PreemptedByAllocation"),
        Field("create_index", "CreateIndex", type=int),
        Field("modify_index", "ModifyIndex", type=int),
        Field("create_time", "CreateTime", type=int),
        Field("modify_time", "ModifyTime", type=int),
    ),
)

DATACENTERS = ResourceKind(
    name="datacenters",
    label="datacenters",
    path="/v1/nodes",
    collection_field="datacenters",
    # The nodes endpoint's own prefix matches node IDs, so both filters are
    # applied to the listing here.
    filters=(
        FilterSpec("prefix"),
        FilterSpec("ignore_down_nodes", default=False),
    ),
    aggregate=datacenters_of,
    identity=UNIQUE,
    scalar=Field("datacenter", "Datacenter"),
)

DEPLOYMENT = ResourceKind(
    name="deployment",
    label="deployment",
    path="/v1/deployment/{key}",
    key_param="deployment_id",
    identity=NATURAL,
    identity_source="ID",
    fields=(
        Field("namespace", "Namespace"),
        Field("job_id", "JobID"),
        Field("job_version", "JobVersion", type=int),
        Field("job_create_index", "JobCreateIndex", type=int),
        Field("job_modify_index", "JobModifyIndex", type=int),
        Field(
            "task_groups",
            "TaskGroups",
            map_of(
                projected_map(
                    {
                        "placed_canaries": "PlacedCanaries",
                        "auto_revert": "AutoRevert",
                        "promoted": "Promoted",
                        "desired_canaries": "DesiredCanaries",
                        "desired_total": "DesiredTotal",
                        "placed_alloc": "PlacedAllocs",
                        "healthy_alloc": "HealthyAllocs",
                        "unhealthy_alloc": "UnhealthyAllocs",
                    }
                )
            ),
            dict,
        ),
        Field("status", "Status"),
        Field("status_description", "StatusDescription"),
        Field("create_index", "CreateIndex", type=int),
        Field("modify_index", "ModifyIndex", type=int),
    ),
)

NODE_POOL = ResourceKind(
    name="node_pool",
    label="node pool",
    path="/v1/node/pool/{key}",
    key_param="name",
    identity=NATURAL,
    identity_source="Name",
    fields=(
        Field("name", "Name"),
        Field("description", "Description"),
        Field("meta", "Meta", as_flat_map, dict),
        Field("node_identity_ttl", "NodeIdentityTTL", omit_zero(as_duration_text)),
        Field("scheduler_config", "SchedulerConfiguration", node_pool_scheduler_config, dict),
    ),
)

PLUGINS = ResourceKind(
    name="plugins",
    label="plugins",
    path="/v1/plugins",
    collection_field="plugins",
    filters=(FilterSpec("type", api_param="type", default="csi", choices=("csi",)),),
    fields=(
        Field("id", "ID"),
        Field("provider", "Provider"),
        Field("controller_required", "ControllerRequired", as_bool_text, zero="false"),
        Field("controllers_healthy", "ControllersHealthy", as_decimal_text, zero="0"),
        Field("controllers_expected", "ControllersExpected", as_decimal_text, zero="0"),
        Field("nodes_healthy", "NodesHealthy", as_decimal_text, zero="0"),
        Field("nodes_expected", "NodesExpected", as_decimal_text, zero="0"),
    ),
)

PLUGIN = ResourceKind(
    name="plugin",
    label="plugin",
    path="/v1/plugin/csi/{key}",
    key_param="plugin_id",
    identity=NATURAL,
    identity_source="ID",
    fields=(
        Field("plugin_id", "ID"),
        Field("plugin_provider", "Provider"),
        Field("plugin_provider_version", "Version"),
        Field("controller_required", "ControllerRequired", type=bool),
        Field("controllers_expected", "Controllers", as_count, int),
        Field("controllers_healthy", "ControllersHealthy", type=int),
        Field("nodes_expected", "Nodes", as_count, int),
        Field("nodes_healthy", "NodesHealthy", type=int),
        Field(
            "nodes",
            "Nodes",
            keyed_records("name", {"healthy": "Healthy", "healthy_description": "HealthDescription"}),
            list,
        ),
    ),
)

RESOURCE_KINDS = {
    kind.name: kind
    for kind in (
        ACL_POLICIES,
        ACL_POLICY,
        ACL_ROLE,
        ACL_ROLES,
        ACL_TOKEN,
        ACL_TOKENS,
        ALLOCATIONS,
        DATACENTERS,
        DEPLOYMENT,
        DEPLOYMENTS,
        JOB_PARSER,
        NAMESPACE,
        NAMESPACES,
        NODE_POOL,
        NODE_POOLS,
        PLUGIN,
        PLUGINS,
        REGIONS,
        SCALING_POLICIES,
        SCALING_POLICY,
        SCHEDULER_CONFIG,
        VOLUMES,
    )
}
