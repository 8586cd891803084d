"""
Repair of missing sequenceFlow back-references in BPMN 2.0 documents.

Every element referenced by a sequenceFlow's sourceRef/targetRef must list
the flow in an outgoing/incoming child. This package adds those children
where they are missing and writes a corrected copy of the file.
"""

from .exceptions import InvalidInputError, InvalidReferenceError, SequenceFlowFixError
from .solver import FixResult, SequenceFlowSolver

__all__ = [
    "FixResult",
    "InvalidInputError",
    "InvalidReferenceError",
    "SequenceFlowFixError",
    "SequenceFlowSolver",
]
