from pathlib import PurePath
from typing import Dict

from tree_sitter import Language, Parser
import tree_sitter_typescript as tstypescript

from tsorganizer.logging_config import logger

# Grammar per file extension; anything else is parsed as plain TypeScript
EXTENSION_GRAMMARS = {
    ".ts": "typescript",
    ".mts": "typescript",
    ".cts": "typescript",
    ".tsx": "tsx",
}

# Loaded languages are immutable and safe to share; parsers are created per call
_language_cache: Dict[str, Language] = {}


def grammar_for(file_path: str) -> str:
    """Pick the grammar name for a file path."""
    return EXTENSION_GRAMMARS.get(PurePath(file_path).suffix.lower(), "typescript")


def get_language(grammar: str) -> Language:
    """
    Load a tree-sitter language from the installed grammar package.

    Caches the loaded language object for efficiency.
    """
    if grammar in _language_cache:
        return _language_cache[grammar]

    if grammar == "tsx":
        language = Language(tstypescript.language_tsx())
    else:
        language = Language(tstypescript.language_typescript())
    _language_cache[grammar] = language
    logger.debug(f"Successfully loaded language '{grammar}'")
    return language


def create_parser(file_path: str) -> Parser:
    """Create a parser for the grammar matching file_path."""
    parser = Parser()
    parser.language = get_language(grammar_for(file_path))
    return parser
