"""Seed a small catalog and a few stored pals for development/testing."""

from palbox.gateway import StoreGateway
from palbox.service import PalService

DEMO_PALS = [
    {
        "id": "001",
        "name": "Lamball",
        "imageUrl": "https://paldb.cc/images/lamball.png",
        "suitability": [{"work": "Handiwork", "level": 1}, {"work": "Farming", "level": 1}],
        "children": [{"parent": "Cattiva", "child": "Lamball"}],
    },
    {
        "id": "002",
        "name": "Cattiva",
        "imageUrl": "https://paldb.cc/images/cattiva.png",
        "suitability": [{"work": "Mining", "level": 1}, {"work": "Transporting", "level": 1}],
        "children": [{"parent": "Lamball", "child": "Lamball"}],
    },
    {
        "id": "005",
        "name": "Foxparks",
        "imageUrl": "https://paldb.cc/images/foxparks.png",
        "suitability": [{"work": "Kindling", "level": 1}],
        "children": [],
    },
    {
        "id": "040",
        "name": "Incineram",
        "imageUrl": "https://paldb.cc/images/incineram.png",
        "suitability": [{"work": "Kindling", "level": 1}, {"work": "Mining", "level": 1}],
        "children": [],
    },
]

DEMO_PASSIVE_SKILLS = [
    {"name": "Swift", "effect": "Movement speed +30%", "tier": 3},
    {"name": "Runner", "effect": "Movement speed +20%", "tier": 2},
    {"name": "Artisan", "effect": "Work speed +50%", "tier": 3},
    {"name": "Serious", "effect": "Work speed +20%", "tier": 1},
    {"name": "Legend", "effect": "Attack +20%, Defense +20%, Movement speed +15%", "tier": 4},
    {"name": "Lucky", "effect": "Work speed +15%, Attack +15%", "tier": 4},
]

DEMO_COMBOS = [
    {"name": "Worker", "skills": ["Artisan", "Serious", "Lucky"]},
    {"name": "Mount", "skills": ["Swift", "Runner", "Legend"]},
]


async def create_demo_data(gateway: StoreGateway) -> dict[str, int]:
    """Overwrite all collections with the demo catalog and sample pals."""
    service = PalService(gateway)
    counts = await service.import_data({
        "pals": DEMO_PALS,
        "passive_skills": DEMO_PASSIVE_SKILLS,
        "passive_skill_combos": DEMO_COMBOS,
        "stored_pals": [],
    })
    await service.add_pal("Lamball", "m", ["Artisan", "Serious"])
    await service.add_pal("Lamball", "f", ["Lucky"])
    await service.add_pal("Foxparks", "female", ["Swift", "Runner"])
    await service.add_pal("Incineram", "m", [])
    counts["stored_pals"] = len(await service.stored())
    return counts
