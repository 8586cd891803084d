"""
Placement of new incoming/outgoing elements.

BPMN flow nodes have a fixed child order: documentation, extensionElements,
auditing, monitoring, categoryValueRef, incoming*, outgoing*, followed by
node-specific children. A new back-reference is placed right after the last
child of the highest ranked category in ALLOWED_ELEMENTS_BEFORE, or first
if none of them is present. The same rule serves incoming and outgoing.
"""

import logging

from lxml import etree

from .constants import ALLOWED_ELEMENTS_BEFORE
from .id_index import element_filter, local_name

logger = logging.getLogger(__name__)


def determine_index_for_element_insertion(parent: etree._Element) -> int:
    """
    Compute the child position for a new incoming/outgoing element.

    Args:
        parent: Element receiving the new child

    Returns:
        Zero-based index into the parent's children
    """
    children = list(parent)

    for name in ALLOWED_ELEMENTS_BEFORE:
        matches = element_filter(name)
        relevant = [child for child in children if matches(child)]
        if relevant:
            index = parent.index(relevant[-1])
            logger.debug(f"Found elem: {name} at Index: {index}")
            return index + 1

    logger.debug("No Elem found - returning 0 - newElem can be placed at first place.")
    return 0


def insert_child(parent: etree._Element, new_child: etree._Element) -> int:
    """
    Insert new_child into parent at the position required by the child order.

    Returns:
        Index at which the child now sits
    """
    index = determine_index_for_element_insertion(parent)
    logger.debug(f"Determined index: {index}")

    if index > len(parent):
        logger.debug(
            f"Adding SubElement '{local_name(new_child)}' to element "
            f"'{local_name(parent)}' as last SubElem"
        )
        parent.append(new_child)
        return len(parent) - 1

    logger.debug(
        f"Adding SubElement '{local_name(new_child)}' to element "
        f"'{local_name(parent)}' at Pos.{index}"
    )
    parent.insert(index, new_child)
    return index
