"""
Case classification and kebab-case conversion for file and directory names.
"""

from enum import Enum
from typing import Optional


class CaseFamily(str, Enum):
    """Naming convention a base name is written in."""
    PASCAL = "pascal"
    CAMEL = "camel"
    ACRONYM = "acronym"
    KEBAB = "kebab"


# Common web/frontend acronyms. Used only to split a run of capitals that
# holds several acronyms back to back (XMLHTTP -> XML, HTTP).
KNOWN_ACRONYMS = frozenset({
    "AI", "API", "AST", "AWS", "CLI", "CSS", "CSV", "DB", "DNS", "DOM",
    "FAQ", "GPU", "GQL", "HTML", "HTTP", "HTTPS", "ID", "IO", "IP", "JS",
    "JSON", "JSX", "JWT", "MD", "OS", "PDF", "PNG", "RPC", "SDK", "SQL",
    "SSR", "SVG", "TCP", "TS", "TSX", "UI", "URI", "URL", "UUID", "UX",
    "XHR", "XML", "YAML",
})

_LONGEST_ACRONYM = max(len(a) for a in KNOWN_ACRONYMS)


def has_uppercase(name: str) -> bool:
    """Check if ``name`` contains at least one uppercase letter."""
    return any(ch.isupper() for ch in name)


def classify_case(name: str) -> CaseFamily:
    """
    Classify a base name into one of the four case families.

    Two consecutive uppercase letters anywhere make the name an acronym
    name. Otherwise a name without capitals is kebab, a name starting with
    a capital is Pascal and anything else is camel.

    Parameters
    ----------
    name : str
        Base name (no directory, no extension)

    Returns
    -------
    CaseFamily
        Detected case family

    Examples
    --------
    >>> classify_case("API")
    <CaseFamily.ACRONYM: 'acronym'>
    >>> classify_case("Id")
    <CaseFamily.PASCAL: 'pascal'>
    """
    seen_upper = False
    consecutive = 0

    for ch in name:
        if ch.isupper():
            seen_upper = True
            consecutive += 1
            if consecutive >= 2:
                return CaseFamily.ACRONYM
        else:
            consecutive = 0

    if not seen_upper:
        return CaseFamily.KEBAB
    if name[0].isupper():
        return CaseFamily.PASCAL
    return CaseFamily.CAMEL


def _humps_to_kebab(name: str) -> str:
    # Every capital after the first character opens a new word, unless it
    # already follows a separator such as - _ or .
    out = []
    for ch in name:
        if ch.isupper():
            if out and out[-1].isalnum():
                out.append("-")
            out.append(ch.lower())
        else:
            out.append(ch)
    return "".join(out)


def pascal_to_kebab(name: str) -> str:
    """Convert a PascalCase name, e.g. ``ButtonComponent`` -> ``button-component``."""
    return _humps_to_kebab(name)


def camel_to_kebab(name: str) -> str:
    """Convert a camelCase name, e.g. ``myComponent`` -> ``my-component``."""
    return _humps_to_kebab(name)


def _split_run(run: str) -> Optional[list[str]]:
    """
    Split a run of capitals into known acronyms, longest match first.

    Returns None when the run cannot be covered completely.
    """
    if not run:
        return []
    for size in range(min(len(run), _LONGEST_ACRONYM), 1, -1):
        head = run[:size]
        if head in KNOWN_ACRONYMS:
            rest = _split_run(run[size:])
            if rest is not None:
                return [head] + rest
    return None


def _run_boundaries(name: str, start: int, end: int) -> set[int]:
    """Word boundaries inside the uppercase run ``name[start:end]``."""
    boundaries = set()

    # The last capital of a run followed by a lowercase letter starts the
    # next word: APIEndpoint -> API + Endpoint.
    acronym_end = end
    if end < len(name) and name[end].islower() and end - start > 1:
        acronym_end = end - 1
        boundaries.add(acronym_end)

    parts = _split_run(name[start:acronym_end])
    if parts and len(parts) > 1:
        pos = start
        for part in parts[:-1]:
            pos += len(part)
            boundaries.add(pos)

    return boundaries


def acronym_to_kebab(name: str) -> str:
    """
    Convert a name containing acronym runs to kebab-case.

    Each run of capitals collapses into a single lowercase word, and one
    ``-`` separates neighbouring words. Runs made of several known acronyms
    are split between them.

    Parameters
    ----------
    name : str
        Base name with at least two consecutive capitals

    Returns
    -------
    str
        Kebab-case name

    Examples
    --------
    >>> acronym_to_kebab("XMLHTTPRequest")
    'xml-http-request'
    >>> acronym_to_kebab("MyAPIService")
    'my-api-service'
    """
    boundaries = set()
    i = 0
    while i < len(name):
        ch = name[i]
        if not ch.isupper():
            i += 1
            continue

        # Lowercase letter or digit followed by a capital: new word.
        if i > 0 and (name[i - 1].islower() or name[i - 1].isdigit()):
            boundaries.add(i)

        end = i
        while end < len(name) and name[end].isupper():
            end += 1
        boundaries |= _run_boundaries(name, i, end)
        i = end

    out = []
    for i, ch in enumerate(name):
        if i in boundaries and out and out[-1].isalnum():
            out.append("-")
        out.append(ch.lower() if ch.isupper() else ch)
    return "".join(out)


_CONVERTERS = {
    CaseFamily.PASCAL: pascal_to_kebab,
    CaseFamily.CAMEL: camel_to_kebab,
    CaseFamily.ACRONYM: acronym_to_kebab,
}


def convert_case(name: str, family: CaseFamily) -> str:
    """Apply the conversion algorithm of ``family`` to ``name``."""
    converter = _CONVERTERS.get(family)
    if converter is None:
        return name
    return converter(name)


def to_kebab(name: str) -> str:
    """
    Convert any base name to kebab-case.

    Names without uppercase letters are returned unchanged, so the
    conversion is idempotent: ``to_kebab(to_kebab(s)) == to_kebab(s)``.

    Parameters
    ----------
    name : str
        Base name to convert

    Returns
    -------
    str
        Kebab-case form of ``name``
    """
    if not has_uppercase(name):
        return name
    return convert_case(name, classify_case(name))
