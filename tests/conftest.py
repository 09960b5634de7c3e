from typing import Any, Dict, List

import pytest


@pytest.fixture
def twenty_leagues() -> List[Dict[str, Any]]:
    return [
        {
            "Title": "Twenty Thousand Leagues Under the Sea",
            "ISBN": "9780000528531",
            "Content": [
                {"Page": 31, "Line": 8, "Text": "now simply went on by her own momentum.  The dark-"},
                {"Page": 31, "Line": 9, "Text": "ness was then profound; and however good the Canadian's"},
                {"Page": 31, "Line": 10, "Text": "eyes were, I asked myself how he had managed to see, and"},
            ],
        }
    ]
