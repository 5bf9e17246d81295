"""
Rewriting of import/require path specifiers in source text.
"""

import re
from dataclasses import dataclass
from typing import Iterator

from .case import has_uppercase, to_kebab


# Static imports (including `import type`) and require() calls. The
# specifier is everything between the quotes; the suffix keeps the closing
# quote plus an optional `)` and/or `;`.
IMPORT_PATTERN = re.compile(
    r"""
    (?P<prefix>\bimport\s+[^"']*?from\s*["']|\brequire\(\s*["'])
    (?P<specifier>[^"']+)
    (?P<suffix>["']\)?;?)
    """,
    re.VERBOSE,
)

DOT_SEGMENTS = (".", "..")
RELATIVE_PREFIXES = ("./", "../")


@dataclass(frozen=True)
class ImportMatch:
    """
    A single import/require construct found in source text.

    Attributes
    ----------
    start : int
        Offset of the match in the source text
    end : int
        Offset just past the match
    prefix : str
        Text up to and including the opening quote
    specifier : str
        Path between the quotes
    suffix : str
        Closing quote and any trailing ``)`` / ``;``
    """

    start: int
    end: int
    prefix: str
    specifier: str
    suffix: str

    @property
    def is_relative(self) -> bool:
        """Check if the specifier starts with ``./`` or ``../``."""
        return self.specifier.startswith(RELATIVE_PREFIXES)


def find_imports(content: str) -> Iterator[ImportMatch]:
    """Yield every import/require construct in ``content``, in order."""
    for m in IMPORT_PATTERN.finditer(content):
        yield ImportMatch(
            start=m.start(),
            end=m.end(),
            prefix=m.group("prefix"),
            specifier=m.group("specifier"),
            suffix=m.group("suffix"),
        )


def rewrite_segment(segment: str) -> tuple[str, bool]:
    """
    Convert one ``/``-delimited segment of a specifier.

    ``.`` and ``..`` are kept. Everything after the first ``.`` is treated
    as the extension tail and kept verbatim; only the name in front of it
    is converted, and only if it contains an uppercase letter.

    Returns
    -------
    tuple[str, bool]
        New segment and whether it was rewritten
    """
    if segment in DOT_SEGMENTS:
        return segment, False

    name, dot, tail = segment.partition(".")
    if not has_uppercase(name):
        return segment, False

    return to_kebab(name) + dot + tail, True


def rewrite_specifier(specifier: str) -> tuple[str, int]:
    """
    Convert every segment of an import specifier.

    Empty segments are preserved, so leading, trailing and doubled slashes
    survive unchanged.

    Returns
    -------
    tuple[str, int]
        New specifier and number of segments rewritten
    """
    changes = 0
    segments = []
    for segment in specifier.split("/"):
        new_segment, changed = rewrite_segment(segment)
        if changed:
            changes += 1
        segments.append(new_segment)
    return "/".join(segments), changes


def update_imports(content: str, relative_only: bool = False) -> tuple[str, int]:
    """
    Rewrite the path specifiers of all imports in a source file.

    Parameters
    ----------
    content : str
        Full source text
    relative_only : bool, default=False
        Only rewrite specifiers starting with ``./`` or ``../``, leaving
        bare package names alone

    Returns
    -------
    tuple[str, int]
        New source text and total number of segments rewritten

    Examples
    --------
    >>> update_imports("import A from './MyComponent.svelte';")
    ("import A from './my-component.svelte';", 1)
    """
    changes = 0
    pieces = []
    last = 0

    for match in find_imports(content):
        if relative_only and not match.is_relative:
            continue
        new_specifier, count = rewrite_specifier(match.specifier)
        if count == 0:
            continue
        changes += count
        pieces.append(content[last:match.start])
        pieces.append(match.prefix + new_specifier + match.suffix)
        last = match.end

    if changes == 0:
        return content, 0

    pieces.append(content[last:])
    return "".join(pieces), changes
