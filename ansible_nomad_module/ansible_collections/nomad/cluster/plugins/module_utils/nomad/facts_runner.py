from ansible_collections.nomad.cluster.plugins.module_utils.nomad.base_runner import (
    BaseRunner,
)
from ansible_collections.nomad.cluster.plugins.module_utils.nomad.classifier import (
    Outcome,
    ResultClassifier,
)
from ansible_collections.nomad.cluster.plugins.module_utils.nomad.errors import (
    NomadAPIError,
    NomadModuleError,
    SerializationError,
    StateWriteError,
)
from ansible_collections.nomad.cluster.plugins.module_utils.nomad.identity import (
    Identity,
    IdentityAssigner,
)
from ansible_collections.nomad.cluster.plugins.module_utils.nomad.state import (
    FieldCommitter,
    OutputState,
)


class FactsRunner(BaseRunner):
    """
    A runner for modules that only retrieve information ('facts').

    One read is a fixed pipeline: build the query from the module parameters,
    call the API, classify the outcome, flatten the result, assign the
    identity and commit the flattened fields to the output state. A resource
    that does not exist is not an error: the module exits with a cleared
    identity and no fields.
    """

    def __init__(self, module, context, client=None, classifier=None):
        super().__init__(module, context, client)
        self.classifier = classifier or ResultClassifier()
        self.identity = Identity.cleared()
        self.state = OutputState(context.output_fields())

    def run(self):
        """The entire logic is to read the resource and then exit."""
        try:
            self.read()
        except NomadModuleError as e:
            self.module.fail_json(msg=str(e))
            return
        self.exit()

    def read(self):
        """
        Performs the read without exiting the module.

        Returns:
            A tuple of the read's `Identity` and its `OutputState`.

        Raises:
            ValidationError: a module input is invalid; no request was made.
            NomadAPIError: the API call failed for a reason other than "not found".
            SerializationError: a field could not be rendered.
            StateWriteError: a flattened field was rejected by the output state.
        """
        builder = self.context.query_builder()
        query = builder.build(self.module.params)
        subject = self._subject(query)

        self.module.debug(f"Reading {subject}{self._describe_filters(query)}")
        outcome = self.classifier.classify(lambda: self.fetch(query, builder))

        if outcome.is_failure:
            raise NomadAPIError(
                f"error reading {subject}: {outcome.error}",
                status_code=outcome.error.status_code,
            )
        # A singleton answered with an empty body is treated like a missing one.
        if outcome.is_success and outcome.value is None and not self.context.is_collection:
            outcome = Outcome.absent()

        assigner = IdentityAssigner(self.client.address)
        if outcome.is_absent:
            self.module.debug(f"{subject} not found")
            self.identity = assigner.assign(self.context, outcome, query)
            return self.identity, self.state

        try:
            values = self.flatten(outcome.value, query)
        except SerializationError as e:
            raise SerializationError(f"error reading {subject}: {e}")

        self.identity = assigner.assign(self.context, outcome, query)

        committer = FieldCommitter(self.state)
        committer.commit_all(values)
        error = committer.finalize()
        if error is not None:
            raise StateWriteError(f"error setting {subject}: {error}")

        self.module.debug(f"Read {subject}")
        return self.identity, self.state

    def fetch(self, query, builder):
        """Sends the API request for `query` and returns the decoded body."""
        path_params = {"key": query.key} if query.key is not None else None
        data = self.context.body(query) if self.context.body else None
        return self.client.send_request(
            self.context.method,
            self.context.path,
            data=data,
            query_params=builder.api_params(query),
            path_params=path_params,
        )

    def flatten(self, value, query) -> dict:
        """Flattens the API result into the field values of the output state."""
        flattener = self.context.flattener()
        if not self.context.is_collection:
            return flattener.flatten(value)

        items = list(value or [])
        selected = self.context.select(items, query)
        dropped = len(items) - len(selected)
        if dropped:
            self.module.warn(
                f"{dropped} {self.context.label} returned by the API did not match the requested filters and were dropped."
            )
        if self.context.aggregate is not None:
            selected = self.context.aggregate(selected, query)
        return {self.context.collection_field: flattener.flatten_all(selected)}

    def exit(self):
        """
        Exits the module, returning the identity and the committed fields.
        """
        self.module.exit_json(
            changed=self.has_changed,
            id=str(self.identity),
            exists=self.identity.exists,
            **self.state.as_dict(),
        )

    def _subject(self, query) -> str:
        if query.key is not None:
            return f'{self.context.label} "{query.key}"'
        return self.context.label

    def _describe_filters(self, query) -> str:
        described = []
        for spec in self.context.filters:
            if spec.api_param is None:
                continue
            value = query.get(spec.name)
            if value is not None and value != "":
                described.append(f"{spec.name}: {value}")
        if not described:
            return ""
        return " for " + ", ".join(described)
