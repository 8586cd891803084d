#!/usr/bin/env python3
"""
Tests for the logging setup.
"""

import logging
import tempfile
from pathlib import Path

from seqflow_fix.utils import reset_logger, setup_logger


def test_setup_logger_twice_closes_previous_file_handler():
    with tempfile.TemporaryDirectory() as tmpdir:
        log_file = Path(tmpdir) / "logs" / "fixer.log"
        try:
            first = setup_logger("seqflow_fix.test_twice", log_file=log_file, console=False)
            old_handler = first.handlers[-1]
            first.info("first run")

            second = setup_logger("seqflow_fix.test_twice", log_file=log_file, console=False)
            second.info("second run")

            assert second is first
            assert old_handler.stream is None or old_handler.stream.closed
            assert old_handler not in second.handlers
            assert len(second.handlers) == 1
            text = log_file.read_text(encoding='utf-8')
            assert "first run" in text
            assert "second run" in text
        finally:
            reset_logger("seqflow_fix.test_twice")


def test_setup_logger_levels_and_console():
    try:
        logger = setup_logger("seqflow_fix.test_console", level=logging.DEBUG)

        assert logger.level == logging.DEBUG
        assert logger.propagate is False
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0], logging.StreamHandler)
        assert logger.handlers[0].level == logging.DEBUG
    finally:
        reset_logger("seqflow_fix.test_console")


def test_reset_logger_restores_propagation():
    with tempfile.TemporaryDirectory() as tmpdir:
        log_file = Path(tmpdir) / "fixer.log"
        logger = setup_logger("seqflow_fix.test_reset", log_file=log_file, console=False)
        file_handler = logger.handlers[0]

        reset_logger("seqflow_fix.test_reset")

        assert logger.handlers == []
        assert logger.propagate is True
        assert logger.level == logging.NOTSET
        assert file_handler.stream is None or file_handler.stream.closed
