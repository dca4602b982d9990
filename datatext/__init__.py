"""Top-level package for datatext.

This package provides `Text`, a mutable string value that is built up through
chained `set`/`append` calls and guards against doubled punctuation, plus the
list-joining and word-replacement helpers it uses.
"""

from loguru import logger

from .cleaner import CleanOptions, TextCleaner
from .config import ConfigLoader, DataTextConfig
from .conjunction import ConjunctionFormatter, conjunction, disjunction
from .errors import (
    DataTextWarning,
    MissingTextWarning,
    PunctuationConflictWarning,
    TextOperationError,
    UsageError,
)
from .provenance import SourceLocation
from .text import Stringable, Text, TextResult

logger.disable(__name__)

__all__ = [
    "Text",
    "TextResult",
    "Stringable",
    "SourceLocation",
    "DataTextConfig",
    "ConfigLoader",
    "TextCleaner",
    "CleanOptions",
    "ConjunctionFormatter",
    "conjunction",
    "disjunction",
    "UsageError",
    "DataTextWarning",
    "MissingTextWarning",
    "PunctuationConflictWarning",
    "TextOperationError",
    "__version__",
]

__version__ = "0.14.0"
