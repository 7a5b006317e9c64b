class ConfigError(Exception):
    """
    Custom exception thrown when there is an unrecoverable configuration error.
    """


class OperationFailedError(Exception):
    """
    Custom exception thrown when any operation fails.
    """


class RemoteCallFailure(OperationFailedError):
    """
    Custom exception thrown when the device rejects or fails a node call.

    Carries the operation ("creating", "retrieving", "modifying", "deleting"),
    the node name and the underlying error.
    """

    def __init__(self, operation, name, cause):
        self.operation = operation
        self.name = name
        self.cause = cause
        super().__init__(f"error {operation} node {name}: {cause}")
