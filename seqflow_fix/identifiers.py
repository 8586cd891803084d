"""
Generation of ids for sequenceFlow elements that lack one.
"""

import hashlib
import logging
from pathlib import Path
from typing import Set, Union

from lxml import etree

from .constants import ID

logger = logging.getLogger(__name__)


def collect_existing_ids(tree: etree._ElementTree) -> Set[str]:
    """Return every id attribute value in the document, whatever the namespace."""
    return {
        elem.get(ID)
        for elem in tree.getroot().iter()
        if isinstance(elem.tag, str) and elem.get(ID) is not None
    }


def create_seq_flow_id(
    seq_flow: etree._Element,
    path: Union[str, Path],
    taken_ids: Set[str]
) -> str:
    """
    Create and set an id on a sequenceFlow element.

    The id is derived from the file path and the element's position in the
    tree, so repeated runs on the same file give the same id. taken_ids is
    updated with the new id.

    Args:
        seq_flow: The sequenceFlow element to change
        path: Path of the file the element was loaded from
        taken_ids: Ids already in use within the document

    Returns:
        The new id
    """
    element_path = seq_flow.getroottree().getpath(seq_flow)
    seed = f"{Path(path).resolve()}::{element_path}"

    counter = 0
    while True:
        digest = hashlib.sha1(f"{seed}#{counter}".encode("utf-8")).hexdigest()
        new_id = f"id_{digest[:16]}"
        if new_id not in taken_ids:
            break
        counter += 1

    seq_flow.set(ID, new_id)
    taken_ids.add(new_id)
    logger.debug(f"Generated id {new_id} for sequenceFlow at {element_path}")
    return new_id
