"""Shared file I/O helpers."""

from .json_io import append_output_variable, load_json_file, write_json_atomic

__all__ = ["append_output_variable", "load_json_file", "write_json_atomic"]
