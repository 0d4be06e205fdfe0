from ansible.module_utils.basic import AnsibleModule

from ansible_collections.nomad.cluster.plugins.module_utils.nomad.client import (
    NomadClient,
)


class BaseRunner:
    """
    Abstract base class for all module runners.
    It handles common initialization tasks, such as setting up the API client
    and preparing the execution environment.
    """

    def __init__(self, module: AnsibleModule, context, client: NomadClient | None = None):
        """
        Initializes the runner.

        Args:
            module: The AnsibleModule instance.
            context: The `ResourceKind` describing the read this runner performs.
            client: The Nomad API client. Built from the module's connection
                    options when not given.
        """
        self.module = module
        self.context = context
        self.client = client if client is not None else NomadClient(module)
        self.has_changed = False

    def run(self):
        """
        The main execution method for the runner.
        This method should be implemented by all subclasses.
        """
        raise NotImplementedError
