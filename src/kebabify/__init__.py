"""
kebabify: normalize a frontend source tree to kebab-case names.

Renames files and directories written in PascalCase, camelCase or with
acronym runs (``XMLHTTPRequest``) to kebab-case, and rewrites the path
specifiers of import/require statements so references keep working.

Quick Start
-----------
Convert a single name:

>>> from kebabify import to_kebab
>>> to_kebab("MyAPIService")
'my-api-service'

Normalize a whole tree, imports first, then names:

>>> from kebabify import normalize
>>> result = normalize("src", mode="all")
>>> print(result.summary())
"""

__version__ = "0.1.0"

# High-level API
from .api import (
    Mode,
    normalize,
    process_imports,
    process_directory,
)

# Name conversion
from .core.case import (
    CaseFamily,
    classify_case,
    to_kebab,
)
from .core.imports import update_imports

# Results and errors
from .results import ImportUpdate, NormalizeResult
from .io.renamer import RenameOperation
from .exceptions import (
    KebabifyError,
    PathStructureError,
    FileOperationError,
    SourceDecodeError,
    ConflictingModesError,
)

__all__ = [
    "normalize",
    "process_imports",
    "process_directory",
    "Mode",

    "to_kebab",
    "classify_case",
    "CaseFamily",
    "update_imports",

    "NormalizeResult",
    "ImportUpdate",
    "RenameOperation",

    "KebabifyError",
    "PathStructureError",
    "FileOperationError",
    "SourceDecodeError",
    "ConflictingModesError",

    "__version__",
]
