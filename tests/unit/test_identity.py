import pytest

from ansible_collections.nomad.cluster.plugins.module_utils.nomad.classifier import (
    Outcome,
)
from ansible_collections.nomad.cluster.plugins.module_utils.nomad.errors import (
    NomadAPIError,
)
from ansible_collections.nomad.cluster.plugins.module_utils.nomad.identity import (
    Identity,
    IdentityAssigner,
)
from ansible_collections.nomad.cluster.plugins.module_utils.nomad.query import (
    Query,
)
from ansible_collections.nomad.cluster.plugins.module_utils.nomad.resources import (
    ACL_POLICIES,
    ACL_POLICY,
    ACL_ROLE,
    JOB_PARSER,
    REGIONS,
    SCHEDULER_CONFIG,
)

ADDRESS = "http://127.0.0.1:4646/"


class TestIdentity:
    def test_cleared(self):
        identity = Identity.cleared()

        assert not identity.exists
        assert not identity
        assert str(identity) == ""
        assert identity == Identity("")

    def test_set(self):
        identity = Identity("ops")

        assert identity.exists
        assert str(identity) == "ops"
        assert identity == Identity("ops")
        assert len({identity, Identity("ops")}) == 1


class TestIdentityAssigner:
    def setup_method(self):
        self.assigner = IdentityAssigner(ADDRESS)

    def test_natural_identity_uses_the_resource_key(self):
        outcome = Outcome.success({"ID": "r1", "Name": "ops"})

        identity = self.assigner.assign(ACL_ROLE, outcome, Query(key="r1"))

        assert str(identity) == "r1"

    def test_natural_identity_falls_back_to_the_requested_key(self):
        outcome = Outcome.success({"Description": "no name in body"})

        identity = self.assigner.assign(ACL_POLICY, outcome, Query(key="ops"))

        assert str(identity) == "ops"

    def test_endpoint_identity_is_stable(self):
        first = self.assigner.assign(ACL_POLICIES, Outcome.success([]), Query())
        second = self.assigner.assign(
            ACL_POLICIES, Outcome.success([{"Name": "ops"}]), Query(prefix="o")
        )

        assert str(first) == "http://127.0.0.1:4646/v1/acl/policies"
        assert first == second
        assert first != self.assigner.assign(REGIONS, Outcome.success(["global"]), Query())

    def test_unique_identity_differs_per_read(self):
        outcome = Outcome.success({"SchedulerConfig": {}})

        first = self.assigner.assign(SCHEDULER_CONFIG, outcome, Query())
        second = self.assigner.assign(SCHEDULER_CONFIG, outcome, Query())

        assert first.exists and second.exists
        assert first != second

    @pytest.mark.parametrize("kind", [ACL_POLICIES, ACL_ROLE, SCHEDULER_CONFIG])
    def test_absent_is_cleared(self, kind):
        outcome = Outcome.absent(NomadAPIError("not found", status_code=404))

        identity = self.assigner.assign(kind, outcome, Query(key="r1"))

        assert identity == Identity.cleared()

    def test_failure_is_cleared(self):
        outcome = Outcome.failure(NomadAPIError("boom", status_code=500))

        assert not self.assigner.assign(ACL_ROLE, outcome, Query(key="r1")).exists

    def test_natural_identity_without_any_key_gets_a_token(self):
        outcome = Outcome.success({"Name": "example"})

        first = self.assigner.assign(JOB_PARSER, outcome, Query())
        second = self.assigner.assign(JOB_PARSER, outcome, Query())

        assert first.exists
        assert len(str(first)) == 32
        assert first != second
