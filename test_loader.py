#!/usr/bin/env python3
"""
Tests for loading and validating BPMN documents.
"""

import tempfile
from pathlib import Path

import pytest

from seqflow_fix.constants import BPMN_NAMESPACE
from seqflow_fix.exceptions import InvalidInputError, SequenceFlowFixError
from seqflow_fix.loader import load_file


VALID_BPMN = f"""<?xml version="1.0" encoding="UTF-8"?>
<bpmn:definitions xmlns:bpmn="{BPMN_NAMESPACE}" id="defs">
    <bpmn:process id="proc">

        <bpmn:startEvent id="A"/>
    </bpmn:process>
</bpmn:definitions>
"""


def test_load_valid_file():
    """A well-formed BPMN document is returned as a tree."""
    with tempfile.TemporaryDirectory() as tmpdir:
        path = Path(tmpdir) / "process.bpmn"
        path.write_text(VALID_BPMN, encoding='utf-8')

        tree = load_file(path)

        root = tree.getroot()
        assert root.tag == f"{{{BPMN_NAMESPACE}}}definitions"
        # blank text between elements is dropped on parse
        process = root[0]
        assert process.text is None
        assert process[0].tail is None


def test_load_missing_path():
    with tempfile.TemporaryDirectory() as tmpdir:
        with pytest.raises(InvalidInputError):
            load_file(Path(tmpdir) / "missing.bpmn")


def test_load_directory_is_rejected():
    with tempfile.TemporaryDirectory() as tmpdir:
        with pytest.raises(InvalidInputError) as excinfo:
            load_file(Path(tmpdir))
        assert "is invalid" in str(excinfo.value)


def test_load_malformed_xml():
    with tempfile.TemporaryDirectory() as tmpdir:
        path = Path(tmpdir) / "broken.bpmn"
        path.write_text(f'<bpmn:definitions xmlns:bpmn="{BPMN_NAMESPACE}"><bpmn:process>', encoding='utf-8')

        with pytest.raises(InvalidInputError) as excinfo:
            load_file(path)
        assert excinfo.value.__cause__ is not None


def test_load_wrong_root_name():
    with tempfile.TemporaryDirectory() as tmpdir:
        path = Path(tmpdir) / "process.bpmn"
        path.write_text(f'<bpmn:process xmlns:bpmn="{BPMN_NAMESPACE}" id="p"/>', encoding='utf-8')

        with pytest.raises(InvalidInputError):
            load_file(path)


def test_load_wrong_root_namespace():
    """definitions in another namespace (or none) is not a BPMN document."""
    with tempfile.TemporaryDirectory() as tmpdir:
        path = Path(tmpdir) / "process.bpmn"
        path.write_text('<definitions xmlns="http://example.com/other"/>', encoding='utf-8')
        with pytest.raises(InvalidInputError):
            load_file(path)

        path.write_text('<definitions/>', encoding='utf-8')
        with pytest.raises(SequenceFlowFixError):
            load_file(path)


def test_load_default_namespace():
    with tempfile.TemporaryDirectory() as tmpdir:
        path = Path(tmpdir) / "process.bpmn20.xml"
        path.write_text(f'<definitions xmlns="{BPMN_NAMESPACE}"><process id="p"/></definitions>', encoding='utf-8')

        tree = load_file(str(path))
        assert tree.getroot()[0].get("id") == "p"
