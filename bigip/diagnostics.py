"""
Diagnostics returned by resource callbacks.

An empty Diagnostics means the callback succeeded.
"""

from dataclasses import dataclass

ERROR = "error"


@dataclass
class Diagnostic:
    severity: str
    summary: str
    error: Exception = None


class Diagnostics(list):
    """List of Diagnostic entries."""

    def has_error(self):
        return any(d.severity == ERROR for d in self)

    def errors(self):
        return [d for d in self if d.severity == ERROR]

    def __str__(self):
        return "; ".join(f"{d.severity}: {d.summary}" for d in self)


def from_err(err):
    """Wrap an exception into error diagnostics, None gives no diagnostics."""
    if err is None:
        return Diagnostics()
    return Diagnostics([Diagnostic(ERROR, str(err), err)])
