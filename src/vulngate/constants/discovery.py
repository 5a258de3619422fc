"""Constants for source-file discovery."""

from __future__ import annotations

DEFAULT_SOURCE_EXTENSIONS: tuple[str, ...] = (
    ".js",
    ".jsx",
    ".ts",
    ".tsx",
    ".mjs",
    ".cjs",
    ".py",
    ".java",
    ".go",
    ".php",
    ".rb",
    ".cpp",
    ".c",
    ".cs",
)

# Dependency caches and build output; hidden directories are always skipped.
DEFAULT_EXCLUDED_DIRS: tuple[str, ...] = (
    "node_modules",
    "__pycache__",
    "venv",
    "vendor",
    "dist",
    "build",
)

DEFAULT_MAX_FILE_MB: int = 2
