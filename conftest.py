import os

import pytest

# Keep the module-level app in backend.app off the filesystem during tests.
os.environ.setdefault("STORE_BACKEND", "memory")

from palbox.gateway import MemoryGateway  # noqa: E402
from palbox.models import Species, Trait  # noqa: E402
from palbox.service import PalService  # noqa: E402

CATALOG_PALS = [
    {"id": "001", "name": "Lamball", "imageUrl": "https://img.test/lamball.png",
     "suitability": [{"work": "Handiwork", "level": 1}], "children": []},
    {"id": "002", "name": "Cattiva", "imageUrl": "https://img.test/cattiva.png",
     "suitability": [], "children": []},
    {"id": "005", "name": "Foxparks", "imageUrl": "https://img.test/foxparks.png",
     "suitability": [{"work": "Kindling", "level": 1}], "children": []},
]

CATALOG_SKILLS = [
    {"name": "Swift", "effect": "Movement speed +30%", "tier": 3},
    {"name": "Artisan", "effect": "Work speed +50%", "tier": 3},
    {"name": "Lucky", "effect": "Work speed +15%, Attack +15%", "tier": 4},
]


@pytest.fixture
def species_catalog() -> list[Species]:
    return [Species(name=p["name"], image_url=p["imageUrl"]) for p in CATALOG_PALS]


@pytest.fixture
def trait_catalog() -> list[Trait]:
    return [Trait(**s) for s in CATALOG_SKILLS]


@pytest.fixture
def gateway() -> MemoryGateway:
    """A fresh in-memory store holding the test catalogs and no stored pals."""
    return MemoryGateway({
        "pals": CATALOG_PALS,
        "passive_skills": CATALOG_SKILLS,
        "passive_skill_combos": [{"name": "Worker", "skills": ["Artisan", "Lucky"]}],
    })


@pytest.fixture
def service(gateway: MemoryGateway) -> PalService:
    return PalService(gateway)
