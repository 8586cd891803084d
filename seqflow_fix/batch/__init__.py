"""
Batch processing module for the sequenceFlow fixer.

Provides directory discovery of BPMN files and batch repair with per-file
failure isolation.
"""

from .discovery import find_bpmn_files, has_bpmn_suffix
from .processor import BatchProcessor, BatchResult

__all__ = ["BatchProcessor", "BatchResult", "find_bpmn_files", "has_bpmn_suffix"]
