#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
ConfWeaver v0.1.0

Pytest configuration and shared fixtures.

Author: ConfWeaver Development Team
License: MIT - See LICENSE
"""

import pytest
from pathlib import Path
import tempfile
import shutil


@pytest.fixture
def temp_output_dir():
    """Create temporary output directory for tests."""
    temp_dir = tempfile.mkdtemp(prefix="confweaver_test_")
    yield Path(temp_dir)
    # Cleanup after test
    shutil.rmtree(temp_dir, ignore_errors=True)


@pytest.fixture
def sample_config_text():
    """Deployment file exercising every line kind."""
    return """# full-line comment, ignored
KEY1 = value1
KEY2=value2   # inline comment stripped
   KEY3   =   value with spaces trimmed
not a valid line, ignored (no equals sign)
"""


@pytest.fixture
def sample_config_file(temp_output_dir, sample_config_text):
    """Sample configuration written to disk."""
    path = temp_output_dir / "deploy.conf"
    path.write_text(sample_config_text, encoding="utf-8")
    return path

# ConfWeaver v0.1.0
# Any usage is subject to this software's license.
