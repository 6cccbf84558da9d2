"""
Organizer entry point.

Pipeline: parse -> classify -> render -> compare. Pure function of the
input text and configuration; parse failures propagate as ParseError and no
partial output is ever produced.
"""

from typing import Optional

from tsorganizer.config.defaults import default_configuration
from tsorganizer.config.models import Configuration
from tsorganizer.logging_config import logger
from tsorganizer.organizer.assembler import assemble
from tsorganizer.organizer.detector import detect_change
from tsorganizer.parser.model_builder import parse_source
from tsorganizer.schemas import OrganizeResult


def organize(file_path: str, source_text: str, configuration: Optional[Configuration] = None) -> OrganizeResult:
    """
    Reorganize one file.

    Args:
        file_path: Path of the file (selects the grammar, used in errors)
        source_text: Current text of the file
        configuration: Resolved configuration (defaults when None)

    Returns:
        OrganizeResult(changed, output_text)

    Raises:
        ParseError: if source_text is not valid TypeScript
    """
    if configuration is None:
        configuration = default_configuration()

    unit = parse_source(file_path, source_text, configuration.members)
    if not unit.declarations:
        logger.debug(f"Nothing to organize in {file_path}")
        return detect_change(source_text, source_text)

    organized = assemble(unit, configuration)
    result = detect_change(source_text, organized)
    logger.debug(f"Organized {file_path}: changed={result.changed}")
    return result
