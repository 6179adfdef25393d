from pathlib import Path

from protoc_adapter.errors import ReconcileError
from protoc_adapter.output_file_for_path import output_file_for_path


class PlaceholderGenerator:
    def __init__(self, base_output_dir: str, build_tag: str = "ignore", package: str = "ignore"):
        self.base_dir = Path(base_output_dir)
        self.build_tag = build_tag
        self.package = package

    def generate_placeholder(self, rel_path: str) -> bytes:
        """
        Writes an empty, build-excluded Go file at rel_path.
        Some plugins only emit files when the proto defines something relevant
        to them (e.g. services for grpc-gateway), so missing outputs are expected.
        Always overwrites, so repeated runs leave identical bytes behind.
        """
        target = output_file_for_path(self.base_dir, rel_path)
        content = self.placeholder_content()
        try:
            target.write_bytes(content)
        except OSError as e:
            raise ReconcileError(f"Cannot write placeholder {rel_path}: {e}") from e
        return content

    def placeholder_content(self) -> bytes:
        # // +build is still read by toolchains older than Go 1.17
        return (
            f"//go:build {self.build_tag}\n"
            f"// +build {self.build_tag}\n"
            "\n"
            f"package {self.package}\n"
        ).encode("utf-8")
