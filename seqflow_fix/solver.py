"""
SequenceFlow cross-reference repair.

BPMN requires every element referenced by a sequenceFlow through sourceRef
or targetRef to point back at the flow with an outgoing resp. incoming child
element. Some modelling tools leave these out. SequenceFlowSolver finds the
missing back-references, adds them and writes a corrected copy of the file.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Set, Union

from lxml import etree

from .constants import BPMN_NAMESPACE, ID, INCOMING, OUTGOING, SEQ_FLOW, SOURCE_REF, TARGET_REF, qname
from .exceptions import InvalidReferenceError
from .id_index import create_id_element_map, element_filter, get_all_elements_by_filter, local_name
from .identifiers import collect_existing_ids, create_seq_flow_id
from .loader import load_file
from .ordering import insert_child
from .persister import DEFAULT_FIXED_PREFIX, fixed_output_path, write_document

logger = logging.getLogger(__name__)


@dataclass
class FixResult:
    """Outcome of repairing one document."""
    path: Path
    changed: bool = False
    fixes: List[str] = field(default_factory=list)
    generated_ids: List[str] = field(default_factory=list)
    output_path: Optional[Path] = None


class SequenceFlowSolver:
    """Checks and fixes sequenceFlow back-references of BPMN files."""

    def __init__(
        self,
        fixed_prefix: str = DEFAULT_FIXED_PREFIX,
        pretty_print: bool = True,
        dry_run: bool = False
    ):
        """
        Args:
            fixed_prefix: File name prefix of corrected copies
            pretty_print: Indent written documents
            dry_run: Report problems without writing any file
        """
        self.fixed_prefix = fixed_prefix
        self.pretty_print = pretty_print
        self.dry_run = dry_run

    def fix_sequence_flow_faults(self, path: Union[str, Path]) -> FixResult:
        """
        Check a BPMN file and write a corrected copy if back-references are missing.

        Nothing is written unless every sequenceFlow was checked successfully.

        Args:
            path: Path of the BPMN file

        Returns:
            FixResult describing what was changed

        Raises:
            InvalidInputError: If the file is not a valid BPMN file
            InvalidReferenceError: If a sequenceFlow references a missing element
            OSError: If the corrected file cannot be written
        """
        path = Path(path)
        logger.info(f"Checking file {path}")
        tree = load_file(path)

        result = self.repair_tree(tree, path)

        if not result.changed:
            logger.info("File was correct. No reference fixes needed.")
            return result

        if self.dry_run:
            logger.info(f"File was incorrect. {len(result.fixes)} fix(es) needed (dry run, nothing written).")
            return result

        logger.info("File was incorrect. Creating new file with fixed sequenceFlow references.")
        result.output_path = write_document(
            tree,
            fixed_output_path(path, self.fixed_prefix),
            pretty_print=self.pretty_print
        )
        return result

    def repair_tree(self, tree: etree._ElementTree, path: Union[str, Path]) -> FixResult:
        """
        Add missing incoming/outgoing elements to a loaded document, in place.

        Args:
            tree: Parsed BPMN document
            path: Path the document was loaded from (used for id generation)

        Returns:
            FixResult with changed set if the tree was modified
        """
        result = FixResult(path=Path(path))

        all_sequence_flows = get_all_elements_by_filter(tree, element_filter(SEQ_FLOW, BPMN_NAMESPACE))
        logger.debug(f"Found {len(all_sequence_flows)} sequenceFlow elements.")

        all_elements_with_ids = create_id_element_map(tree)
        taken_ids: Optional[Set[str]] = None

        for seq_flow in all_sequence_flows:
            if seq_flow.get(ID) is None:
                logger.debug("Process is incorrect as attribute @id is missing for a SequenceFlow - generating a ID")
                if taken_ids is None:
                    taken_ids = collect_existing_ids(tree)
                new_id = create_seq_flow_id(seq_flow, path, taken_ids)
                result.generated_ids.append(new_id)
                result.fixes.append(f"Generated id '{new_id}' for sequenceFlow without id")
                result.changed = True

            logger.debug(f"Checking sourceRef and targetRefs for seqFlow with ID {seq_flow.get(ID)}")

            # both directions are always checked
            source_changed = self.find_and_create_element_for_seq_flow_attribute(
                SOURCE_REF, OUTGOING, all_elements_with_ids, seq_flow, result.fixes
            )
            target_changed = self.find_and_create_element_for_seq_flow_attribute(
                TARGET_REF, INCOMING, all_elements_with_ids, seq_flow, result.fixes
            )
            result.changed = result.changed or source_changed or target_changed

        return result

    def find_and_create_element_for_seq_flow_attribute(
        self,
        seq_flow_attribute: str,
        element_name: str,
        all_elements_with_ids: Dict[str, etree._Element],
        seq_flow: etree._Element,
        fixes: Optional[List[str]] = None
    ) -> bool:
        """
        Make sure the element referenced by seq_flow_attribute points back at seq_flow.

        Looks for a child named element_name (incoming or outgoing) whose text
        is the flow's id in the referenced element and creates it if absent.
        Surrounding whitespace in the existing child text is ignored, since
        BPMN declares these references as whitespace-collapsing QNames.

        Args:
            seq_flow_attribute: sourceRef or targetRef
            element_name: outgoing or incoming
            all_elements_with_ids: Identifier index of the document
            seq_flow: The sequenceFlow element to check
            fixes: Optional list receiving a description of the change

        Returns:
            True if an element was added, False if the reference was already there

        Raises:
            InvalidReferenceError: If the attribute is missing or references no element
        """
        seq_flow_id = seq_flow.get(ID)
        attribute_value = seq_flow.get(seq_flow_attribute)
        elem = all_elements_with_ids.get(attribute_value) if attribute_value is not None else None
        if elem is None:
            raise InvalidReferenceError(seq_flow_id, seq_flow_attribute)

        matches = element_filter(element_name, BPMN_NAMESPACE)
        for child in elem:
            if matches(child) and (child.text or "").strip() == seq_flow_id:
                return False

        new_sub_elem = etree.Element(qname(element_name))
        new_sub_elem.text = seq_flow_id
        index = insert_child(elem, new_sub_elem)

        if fixes is not None:
            fixes.append(
                f"Added <{element_name}>{seq_flow_id}</{element_name}> to "
                f"<{local_name(elem)}> with ID {attribute_value} at position {index}"
            )
        return True
