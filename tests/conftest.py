import os
import sys

import pytest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from tenpin import new_game  # noqa: E402


@pytest.fixture
def game():
    """A fresh game with no rolls recorded."""
    return new_game()
