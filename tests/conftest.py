import sys
from pathlib import Path

import pytest

# Project root on sys.path for "import config" / "from quotebook ..."
sys.path.insert(0, str(Path(__file__).parent.parent))

from quotebook.validators.quotes import Quote


@pytest.fixture
def sample_quotes():
    return [
        Quote("Рукописи не горят", "Булгаков", "Вы не можете этого знать.", "Воланд засмеялся."),
        Quote("Никогда и ничего не просите", "Булгаков", "", "Сами предложат и сами всё дадут."),
    ]
