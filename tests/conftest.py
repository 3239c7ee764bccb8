import os
import sys
from itertools import count
from pathlib import Path

import pytest

# Ensure project root on path for direct module imports
sys.path.insert(0, os.path.abspath(os.path.join(Path(__file__).resolve().parent, "..")))

from factories import TODAY


@pytest.fixture
def today():
    return lambda: TODAY


@pytest.fixture
def ids():
    counter = count(1)
    return lambda: f"id-{next(counter)}"
