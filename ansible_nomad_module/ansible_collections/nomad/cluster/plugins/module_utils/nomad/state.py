from ansible_collections.nomad.cluster.plugins.module_utils.nomad.errors import (
    StateWriteError,
)


class OutputState:
    """
    The output of one read: the fields the module returns to Ansible.

    The state only accepts the field names it was declared with, and only
    values of the declared type (or `None`).
    """

    def __init__(self, fields):
        # `fields` maps a field name to its output type.
        self.fields = dict(fields)
        self.values = {}

    def set(self, name: str, value):
        if name not in self.fields:
            raise StateWriteError(f"'{name}' is not a declared field.")
        expected = self.fields[name]
        # bool is a subclass of int, so it has to be told apart explicitly.
        mismatch = not isinstance(value, expected) or (
            expected is int and isinstance(value, bool)
        )
        if value is not None and mismatch:
            raise StateWriteError(
                f"'{name}' expects {expected.__name__}, got {type(value).__name__}."
            )
        self.values[name] = value

    def as_dict(self) -> dict:
        return dict(self.values)


class FieldCommitter:
    """
    Applies a sequence of field assignments to an output sink.

    Every assignment is attempted even after one fails; only the first
    failure is kept and reported by `finalize()`.
    """

    def __init__(self, sink):
        self.sink = sink
        self.attempts = []
        self.error = None

    def commit(self, name: str, value):
        self.attempts.append((name, value))
        try:
            self.sink.set(name, value)
        except Exception as e:
            if self.error is None:
                self.error = e

    def commit_all(self, values: dict):
        for name, value in values.items():
            self.commit(name, value)

    def finalize(self):
        return self.error
