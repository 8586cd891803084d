"""
Writing repaired documents.

The corrected document goes to a sibling file carrying a prefix
(fixed_process.bpmn for process.bpmn). The original file is not touched.
"""

import logging
from pathlib import Path
from typing import Union

from lxml import etree

logger = logging.getLogger(__name__)

DEFAULT_FIXED_PREFIX = "fixed_"


def fixed_output_path(path: Union[str, Path], prefix: str = DEFAULT_FIXED_PREFIX) -> Path:
    """Return the sibling path the corrected document is written to."""
    path = Path(path)
    return path.parent / f"{prefix}{path.name}"


def write_document(
    tree: etree._ElementTree,
    output_path: Union[str, Path],
    pretty_print: bool = True
) -> Path:
    """
    Serialize a document to disk.

    Args:
        tree: Document to write
        output_path: Destination file, overwritten if it exists
        pretty_print: Indent the output (default: True)

    Returns:
        Path of the written file
    """
    output_path = Path(output_path)
    # lxml treats a str path as a URI and would escape "%" in the file name
    with open(output_path, 'wb') as f:
        tree.write(
            f,
            encoding='utf-8',
            xml_declaration=True,
            pretty_print=pretty_print
        )
    logger.info(f"File created: {output_path}")
    return output_path
