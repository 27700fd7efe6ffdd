"""
Digest function: derive the grouping key from a document identity.

``/path/to/Foo2.txt.old``, ``/x/foo.c`` and ``foo.h`` all reduce to ``foo``,
which is what lets them be cycled through as one group.
"""

from namecycle.core.settings import PATH_SEPARATORS, EXTENSION_SEPARATOR


def base_name(identity: str) -> str:
    """
    Return the final path segment of an identity.

    An identity with no separator is returned unchanged; one ending in a
    separator has an empty final segment.
    """
    cut = max(identity.rfind(sep) for sep in PATH_SEPARATORS)
    return identity[cut + 1:]


def strip_extension(name: str) -> str:
    """Remove one trailing extension, unless the dot starts the name."""
    dot = name.rfind(EXTENSION_SEPARATOR)
    if dot > 0:
        return name[:dot]
    return name


def strip_extensions(name: str) -> str:
    """
    Remove trailing extensions until none is left.

    ``foo.tar.gz`` -> ``foo``, ``.emacs.el`` -> ``.emacs`` (a leading dot is
    never treated as an extension boundary).
    """
    while True:
        stripped = strip_extension(name)
        if stripped == name:
            return name
        name = stripped


def letters_only(text: str) -> str:
    """Delete every character that is not a letter."""
    return "".join(ch for ch in text if ch.isalpha())


def digest(identity: str) -> str:
    """
    Compute the grouping key for an identity string.

    Steps: keep the base name, strip all extensions, lower-case, drop
    non-letters. Filtering after lower-casing also drops the combining marks
    lower-casing can add (``İ`` becomes ``i`` plus U+0307).

    Always returns a string, possibly empty; documents with an empty digest
    group among themselves.
    """
    return letters_only(strip_extensions(base_name(identity)).lower())
