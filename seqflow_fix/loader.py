"""
Loading and validation of BPMN documents.

Parses a file into a mutable lxml tree. Blank text between elements is
dropped on parse so that it plays no part in the checks and the output
can be pretty printed again.
"""

import logging
from pathlib import Path
from typing import Union

from lxml import etree

from .constants import BPMN_NAMESPACE, DEFINITIONS
from .exceptions import InvalidInputError
from .id_index import local_name, namespace_of

logger = logging.getLogger(__name__)


def load_file(path: Union[str, Path]) -> etree._ElementTree:
    """
    Parse a BPMN file and check its root element.

    Args:
        path: Path to the BPMN file

    Returns:
        Parsed element tree

    Raises:
        InvalidInputError: If the path is invalid, the XML is malformed, or the
            root is not bpmn:definitions
    """
    path = Path(path)
    if not path.exists() or not path.is_file():
        raise InvalidInputError(f"Path {path} is invalid.", str(path))

    parser = etree.XMLParser(remove_blank_text=True)
    try:
        with open(path, 'rb') as f:
            tree = etree.parse(f, parser)
    except (etree.XMLSyntaxError, OSError) as e:
        logger.error(f"File could not be processed: {path}: {e}")
        raise InvalidInputError("File is not a valid BPMN file.", str(path)) from e

    root = tree.getroot()
    if local_name(root) != DEFINITIONS or namespace_of(root) != BPMN_NAMESPACE:
        raise InvalidInputError("File is not a valid BPMN file.", str(path))

    return tree
