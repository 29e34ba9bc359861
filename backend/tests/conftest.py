import sys
from pathlib import Path

import pytest

# Ensure the backend package root is on sys.path for direct pytest runs
BACKEND_ROOT = Path(__file__).resolve().parents[1]
if str(BACKEND_ROOT) not in sys.path:
    sys.path.insert(0, str(BACKEND_ROOT))

from utils.models import Dataset  # noqa: E402

SAMPLE_DOCUMENT = {
    "countries": [
        {
            "name": "Australia",
            "cities": [
                {"name": "Sydney, Australia", "imageUrl": "sydney.jpg", "description": "Harbour city."},
                {"name": "Melbourne, Australia", "imageUrl": "melbourne.jpg", "description": "Laneways."},
            ],
        },
        {
            "name": "Japan",
            "cities": [
                {"name": "Tokyo, Japan", "imageUrl": "tokyo.jpg", "description": "Metropolis."},
                {"name": "Kyoto temple town", "imageUrl": "kyoto.jpg", "description": "Old capital."},
            ],
        },
        {
            "name": "Brazil",
            "cities": [
                {"name": "Rio de Janeiro, Brazil", "imageUrl": "rio.jpg", "description": "Carnival."},
            ],
        },
    ],
    "beaches": [
        {"name": "Bora Bora, French Polynesia", "imageUrl": "bora.jpg", "description": "Lagoon."},
        {"name": "Copacabana Beach, Brazil", "imageUrl": "copa.jpg", "description": "Promenade."},
    ],
    "temples": [
        {"name": "Angkor Wat, Cambodia", "imageUrl": "angkor.jpg", "description": "Largest monument."},
        {"name": "Kyoto Temple", "imageUrl": "kyoto-temple.jpg", "description": "Wooden hall."},
        {"name": "Taj Mahal, India", "imageUrl": "taj.jpg", "description": "Marble mausoleum."},
    ],
}


@pytest.fixture
def sample_document():
    return SAMPLE_DOCUMENT


@pytest.fixture
def dataset() -> Dataset:
    return Dataset.from_dict(SAMPLE_DOCUMENT)
