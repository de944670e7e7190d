"""Default configuration values and paths."""

from __future__ import annotations

from pathlib import Path

CONFIG_FILE_NAMES = [
    "luject.yaml",
    "luject.yml",
    ".luject.yaml",
    ".luject.yml",
]

CONFIG_SEARCH_PATHS = [
    Path.cwd(),
    Path.home() / ".config" / "luject",
    Path.home(),
]

DEFAULT_RESOURCES_DIR = Path.home() / ".config" / "luject"
KEYSTORE_FILE_NAME = "sign.keystore"

DEFAULT_ARCH = "armeabi-v7a"
ARM64_ARCH = "arm64-v8a"
ARM64_MARKER = "aarch64"
DEFAULT_ALIGNMENT = 4
INJECTED_SUFFIX = "_injected"
