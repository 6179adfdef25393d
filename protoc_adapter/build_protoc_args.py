"""Logic for assembling the protoc command line."""

import os
import sys

from protoc_adapter.long_path import abs_path


def plugin_name(plugin: str) -> str:
    """Return the generator name protoc expects in ``--<name>_out``."""
    base = os.path.basename(plugin)
    return base.removeprefix("protoc-gen-").removesuffix(".exe")


def build_protoc_args(
    *,
    plugin: str,
    scratch_dir: str,
    options: list[str],
    imports: list[str],
    descriptor_sets: list[str],
    includes: list[str],
    sources: list[str],
    prefix_args: list[str] | None = None,
    platform: str | None = None,
) -> list[str]:
    """Build the arguments passed to protoc (excluding the protoc binary)."""
    platform = platform or sys.platform
    all_options = [*options, *(f"M{m}" for m in imports)]

    plugin_base = os.path.basename(plugin).removesuffix(".exe")
    plugin_path = abs_path(plugin, platform=platform) if platform == "win32" else plugin

    args = [
        *(prefix_args or []),
        f"--{plugin_name(plugin)}_out={','.join(all_options)}:{scratch_dir}",
        "--plugin",
        f"{plugin_base}={plugin_path}",
    ]
    if descriptor_sets:
        args += ["--descriptor_set_in", os.pathsep.join(descriptor_sets)]
    args += [f"-I{inc}" for inc in includes]
    args += sources
    return args
