"""
Identifier index for BPMN documents.

Maps every id declared by a BPMN element to that element. The index is built
once per document and is not updated while the document is repaired.
"""

from typing import Callable, Dict, List, Optional

from lxml import etree

from .constants import BPMN_NAMESPACE, ID


def local_name(element: etree._Element) -> str:
    """Extract local name from element tag."""
    tag = element.tag
    if not isinstance(tag, str):
        return ""
    if tag.startswith("{"):
        return tag.split("}", 1)[1]
    return tag


def namespace_of(element: etree._Element) -> Optional[str]:
    tag = element.tag
    if not isinstance(tag, str) or not tag.startswith("{"):
        return None
    return tag[1:].split("}", 1)[0]


def element_filter(
    name: Optional[str] = None,
    namespace: Optional[str] = BPMN_NAMESPACE
) -> Callable[[etree._Element], bool]:
    """
    Build a predicate selecting elements by local name and namespace.

    Args:
        name: Local name to match (None matches any name)
        namespace: Namespace URI to match (None matches any namespace)

    Returns:
        Function returning True for matching elements. Comments and
        processing instructions never match.
    """
    def matches(element: etree._Element) -> bool:
        if not isinstance(element.tag, str):
            return False
        if name is not None and local_name(element) != name:
            return False
        if namespace is not None and namespace_of(element) != namespace:
            return False
        return True

    return matches


def get_all_elements_by_filter(
    tree: etree._ElementTree,
    predicate: Callable[[etree._Element], bool]
) -> List[etree._Element]:
    """Collect all descendants of the root element accepted by predicate, in document order."""
    return [elem for elem in tree.getroot().iterdescendants() if predicate(elem)]


def create_id_element_map(tree: etree._ElementTree) -> Dict[str, etree._Element]:
    """
    Index all BPMN elements carrying an id attribute.

    Elements are visited in document order; when two elements share an id
    the later one wins.

    Args:
        tree: Parsed BPMN document

    Returns:
        Dictionary of id -> element
    """
    id_map: Dict[str, etree._Element] = {}
    for elem in get_all_elements_by_filter(tree, element_filter()):
        elem_id = elem.get(ID)
        if elem_id is not None:
            id_map[elem_id] = elem
    return id_map
