"""
Typed failures raised while repairing a single document.

Both kinds abort the repair of the current document only. Batch callers
catch SequenceFlowFixError per file and carry on with the remaining files.
"""

from typing import Optional


class SequenceFlowFixError(ValueError):
    """Base class for all per-document repair failures."""


class InvalidInputError(SequenceFlowFixError):
    """The path is not a regular file, not well-formed XML, or not a BPMN document."""

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path


class InvalidReferenceError(SequenceFlowFixError):
    """A sequenceFlow's sourceRef/targetRef is missing or points to no element."""

    def __init__(self, connector_id: Optional[str], attribute: str):
        super().__init__(
            f"attribute '{attribute}' or referenced element for sequenceFlow "
            f"{connector_id} does not exist."
        )
        self.connector_id = connector_id
        self.attribute = attribute
