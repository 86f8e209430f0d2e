"""Locating the game's Resources directory and files inside it."""

from __future__ import annotations

import sys
from pathlib import Path


class ResourceLocator:
    """Resolves resource names to paths; the first directory found is cached."""

    _cached_resource_dir: str = ""

    def __init__(self, resource_dir: str = "") -> None:
        cls = type(self)
        if cls._cached_resource_dir:
            self.resource_dir = cls._cached_resource_dir
            return
        directory = resource_dir or self.find_resources_folder()
        if not directory:
            raise FileNotFoundError("Resources folder not found.")
        self.resource_dir = directory
        cls._cached_resource_dir = directory

    def find_resources_folder(self) -> str:
        """Search near the executable for a Resources directory."""
        base = Path(self.executable_dir())
        candidates = (
            base / "Resources",
            base / ".." / "Resources",
            base / ".." / ".." / "Resources",
            base / ".." / ".." / ".." / "Resources",
        )
        for candidate in candidates:
            if candidate.exists():
                return str(candidate)
        raise FileNotFoundError("Resources folder not found in any of the checked paths.")

    def resource_path(self, resource_name: str, check_exists: bool = True) -> str:
        """Return the full path of a resource, optionally requiring it to exist."""
        full_path = Path(self.resource_dir) / resource_name
        if check_exists and not full_path.exists():
            raise FileNotFoundError(f"Error: Resource {resource_name} does not exist at {full_path}")
        return str(full_path)

    def executable_dir(self) -> str:
        """Directory of the running program."""
        program = sys.argv[0] if sys.argv else ""
        if not program:
            raise RuntimeError("Unable to determine the executable path.")
        return str(Path(program).resolve().parent)