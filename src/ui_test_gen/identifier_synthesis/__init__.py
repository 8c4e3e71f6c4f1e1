"""Identifier synthesis exports."""

from .identifiers import SPEC_FILE_SUFFIX, find_identifier_collisions, spec_file_name, to_identifier

__all__ = [
    "SPEC_FILE_SUFFIX",
    "find_identifier_collisions",
    "spec_file_name",
    "to_identifier",
]
