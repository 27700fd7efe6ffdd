"""
Project-wide constants that are not meant to change at runtime.
"""

PATH_SEPARATORS = ("/", "\\")  # Both POSIX and Windows separators end a directory prefix
EXTENSION_SEPARATOR = "."
