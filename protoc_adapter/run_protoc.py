"""Logic for running the external protoc process."""

import logging
import subprocess
import sys

from protoc_adapter.errors import ProtocInvocationError

logger = logging.getLogger(__name__)


def run_protoc(protoc: str, args: list[str]) -> None:
    """Run protoc and wait for it, raising if it fails."""
    cmd_str = " ".join([protoc, *args])
    logger.debug("Running: %s", cmd_str)
    try:
        result = subprocess.run(
            [protoc, *args],
            capture_output=True,
            text=True,
            errors="replace",
            check=False,
        )
    except OSError as e:
        msg = f"error running '{cmd_str}': {e}"
        raise ProtocInvocationError(msg) from e

    if result.stdout:
        sys.stdout.write(result.stdout)
    if result.stderr:
        sys.stderr.write(result.stderr)

    if result.returncode != 0:
        msg = f"error running '{cmd_str}': exit status {result.returncode}"
        if result.stderr:
            msg += f"\n{result.stderr.rstrip()}"
        raise ProtocInvocationError(msg)
