from pathlib import Path
import sys
import os

import pytest

# Ensure repository root is on the import path so ``dognav`` package is found
sys.path.append(str(Path(__file__).resolve().parent.parent))

# Keep a developer's .env from changing the level seen by tests
os.environ.setdefault("DOGNAV_LOG_LEVEL", "INFO")

from dognav.data import Dog


@pytest.fixture()
def dog():
    return Dog(7, "Rex", breed="Beagle", age=3, description="Loves walks")


@pytest.fixture()
def other_dog():
    return Dog(8, "Luna", breed="Husky", age=2)
