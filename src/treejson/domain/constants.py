from __future__ import annotations

"""
Domain Constants.

Centralizes the fixed names and formatting values shared by the directory
reader and the project generator.
"""

DEFAULT_OUTPUT_DIR = "generated-project"
STRUCTURE_FILE_NAME = "project-structure.json"
PROJECT_FILES_KEY = "project_files"

JSON_INDENT = 2
TEXT_ENCODING = "utf-8"

# Serialized prefixes of the reader error markers
FILE_ERROR_PREFIX = "Error reading file: "
DIRECTORY_ERROR_PREFIX = "Error reading directory: "
DIRECTORY_ERROR_KEY = "error"
