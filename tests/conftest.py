from __future__ import annotations

import os
import sys
from datetime import date
from pathlib import Path

import pytest


def pytest_configure():
    # Ensure project root is on sys.path for absolute imports like 'services.biodata_parser'
    root = Path(__file__).resolve().parents[1]
    if str(root) not in sys.path:
        sys.path.insert(0, str(root))
    # Set test environment knobs
    os.environ.setdefault("RUN_ENV", "test")


@pytest.fixture
def today() -> date:
    return date(2024, 1, 1)


@pytest.fixture
def sample_biodata() -> str:
    return (
        "Name: Priya Verma\n"
        "Gender: Female\n"
        "DOB: 12/03/1998\n"
        "Height: 5'4\"\n"
        "Profession: Software Engineer\n"
        "Father Name: Ramesh Verma\n"
        "Father Occupation: Business\n"
        "Contact: 9876543210\n"
    )
