"""Exception types raised by the adapter."""


class AdapterError(Exception):
    """Base class for every failure the adapter reports."""


class ConfigError(AdapterError):
    """Configuration or params file could not be read."""


class ProtocInvocationError(AdapterError):
    """The external compiler could not be run or exited non-zero."""


class ReconcileError(AdapterError):
    """Filesystem failure while walking the scratch tree or emitting outputs."""


class AmbiguousOutputError(ReconcileError):
    """One or more expected outputs matched several produced files."""

    def __init__(self, paths: list[str], importpath: str) -> None:
        """Build the aggregated report for every ambiguous path."""
        self.paths = paths
        self.importpath = importpath
        lines = [f"Ambiguous output {p}." for p in paths]
        lines.append(f'Check that the go_package option is "{importpath}".')
        super().__init__("\n".join(lines))
