"""This module defines custom Exceptions"""


class HTTPError(Exception):
    """Base class for HTTP errors."""

    def __init__(self, *args, **kwargs):
        """Constructor for HTTP Error"""
        self.response = kwargs.pop("response", None)
        self.status_code = kwargs.pop("status_code", None)
        super(Exception, self).__init__(*args, **kwargs)


class ResourceNotFoundError(HTTPError):
    """Raised when the device answers 404 for the requested object."""


class CommandExecutionError(Exception):
    """Base class any command execution error"""
