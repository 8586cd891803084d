"""
Batch processor for the sequenceFlow fixer.

Runs the repair over a single file or over every BPMN file of a directory
tree. Each document is repaired independently; a failure on one file is
logged and recorded and the remaining files are still processed.
"""

import logging
import time
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Tuple

from ..config.settings import AppConfig
from ..exceptions import SequenceFlowFixError
from ..solver import FixResult, SequenceFlowSolver
from .discovery import find_bpmn_files


@dataclass
class BatchResult:
    """Aggregated outcome of a batch run."""
    fixed: List[FixResult] = field(default_factory=list)
    unchanged: List[FixResult] = field(default_factory=list)
    failed: List[Tuple[Path, str]] = field(default_factory=list)

    def counts(self) -> dict:
        return {
            "fixed": len(self.fixed),
            "unchanged": len(self.unchanged),
            "failed": len(self.failed),
        }


class BatchProcessor:
    """
    Batch processor for BPMN sequenceFlow repair.

    Discovers BPMN files, repairs each one with a SequenceFlowSolver and
    collects the results.
    """

    def __init__(self, config: AppConfig, dry_run: bool = False):
        """
        Initialize batch processor.

        Args:
            config: Application configuration
            dry_run: Check files without writing corrected copies
        """
        self.config = config
        self.solver = SequenceFlowSolver(
            fixed_prefix=config.output.fixed_prefix,
            pretty_print=config.output.pretty_print,
            dry_run=dry_run
        )
        self.logger = logging.getLogger(__name__)

    def discover_files(self, directory: Path) -> List[Path]:
        """Find all BPMN files below directory according to the configuration."""
        skip_prefix = self.config.output.fixed_prefix if self.config.processing.skip_fixed_outputs else None
        return find_bpmn_files(
            directory,
            suffixes=self.config.processing.suffixes,
            skip_prefix=skip_prefix
        )

    def process_file(self, path: Path) -> Tuple[Optional[FixResult], Optional[str]]:
        """
        Repair a single file.

        Args:
            path: BPMN file to repair

        Returns:
            (result, None) on success, (None, error message) on failure
        """
        try:
            return self.solver.fix_sequence_flow_faults(path), None
        except SequenceFlowFixError as e:
            self.logger.error(f"Failed to fix: {path}: {e}")
            return None, str(e)
        except OSError as e:
            self.logger.error(f"Failed to write fixed file for {path}: {e}")
            return None, str(e)

    def process_files(self, paths: List[Path]) -> BatchResult:
        """
        Repair a list of files.

        Files are handled on up to processing.max_concurrent_jobs threads.
        Documents share no state, so the order of completion does not matter.

        Args:
            paths: Files to repair

        Returns:
            BatchResult with fixed, unchanged and failed files
        """
        results = BatchResult()
        if not paths:
            self.logger.info("No files to process")
            return results

        start_time = time.time()
        max_workers = min(self.config.processing.max_concurrent_jobs, len(paths))

        if max_workers <= 1:
            outcomes = [(path, self.process_file(path)) for path in paths]
        else:
            outcomes = []
            with ThreadPoolExecutor(max_workers=max_workers) as executor:
                future_to_path = {
                    executor.submit(self.process_file, path): path
                    for path in paths
                }
                for future in as_completed(future_to_path):
                    outcomes.append((future_to_path[future], future.result()))
            outcomes.sort(key=lambda outcome: str(outcome[0]))

        for path, (result, error) in outcomes:
            if result is None:
                results.failed.append((path, error))
            elif result.changed:
                results.fixed.append(result)
            else:
                results.unchanged.append(result)

        elapsed = time.time() - start_time
        self.logger.info(f"Batch processing complete in {elapsed:.2f}s: {results.counts()}")
        return results

    def process_path(self, path: Path) -> BatchResult:
        """
        Repair a single BPMN file or all BPMN files below a directory.

        Args:
            path: File or directory

        Returns:
            BatchResult (a missing path is reported as a failure)
        """
        path = Path(path)
        if not path.exists():
            self.logger.error(f"File does not exist: {path}")
            results = BatchResult()
            results.failed.append((path, "File does not exist"))
            return results

        if path.is_dir():
            return self.process_files(self.discover_files(path))

        return self.process_files([path])
