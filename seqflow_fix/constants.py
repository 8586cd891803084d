"""
Names and namespaces of the BPMN 2.0 interchange format used by the fixer.
"""

BPMN_NAMESPACE = "http://www.omg.org/spec/BPMN/20100524/MODEL"

DEFINITIONS = "definitions"
SEQ_FLOW = "sequenceFlow"
INCOMING = "incoming"
OUTGOING = "outgoing"
SOURCE_REF = "sourceRef"
TARGET_REF = "targetRef"
ID = "id"

# Order matters: a new back-reference goes after the last element of the
# first category found here.
ALLOWED_ELEMENTS_BEFORE = [
    "incoming",
    "categoryValueRef",
    "monitoring",
    "auditing",
    "extensionElements",
    "documentation",
]

BPMN_SUFFIXES = [".bpmn", ".bpmn2", ".bpmn20.xml"]


def qname(local_name: str, namespace: str = BPMN_NAMESPACE) -> str:
    """Build a Clark-notation tag ({namespace}local) for lxml."""
    return f"{{{namespace}}}{local_name}"
