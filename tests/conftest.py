import sys
from pathlib import Path

import pytest

# Ensure `buildings_api` is importable when running pytest from the repository root.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from buildings_api.models import Building  # noqa: E402


def make_building(building_id, **overrides):
    fields = {
        "id": building_id,
        "name": f"Building {building_id}",
        "city": "Paris",
        "address": "1 Rue de Rivoli",
        "usage": "residential",
        "dpe": "C",
        "lat": 48.85,
        "lng": 2.35,
        "surface": 1000.0,
        "floors": 5,
        "construction_year": 1950,
    }
    fields.update(overrides)
    return Building(**fields)


@pytest.fixture
def buildings():
    """Small mixed dataset around Paris with ties on every sortable field."""
    return [
        make_building("b01", name="Alpha", city="Paris", usage="residential", dpe="A",
                      lat=48.86, lng=2.34, construction_year=1990,
                      address="10 Avenue Victor Hugo"),
        make_building("b02", name="bravo", city="Courbevoie", usage="office", dpe="D",
                      lat=48.90, lng=2.26, construction_year=1970),
        make_building("b03", name="Charlie", city="paris", usage="office", dpe="B",
                      lat=48.84, lng=2.32, construction_year=1990),
        make_building("b04", name="Delta", city="Nanterre", usage="industrial", dpe="G",
                      lat=48.89, lng=2.20, construction_year=1930),
        make_building("b05", name="alpha", city="Montreuil", usage="residential", dpe="C",
                      lat=48.86, lng=2.44, construction_year=2010),
        make_building("b06", name="Echo", city="Paris", usage="commercial", dpe="E",
                      lat=48.87, lng=2.36, construction_year=1970,
                      address="3 Place de la Bastille"),
        make_building("b07", name="Foxtrot", city="Vincennes", usage="residential", dpe="F",
                      lat=48.85, lng=2.44, construction_year=1955),
        make_building("b08", name="Golf", city="Courbevoie", usage="education", dpe="B",
                      lat=48.90, lng=2.27, construction_year=2001),
        make_building("b09", name="Hotel", city="Paris", usage="residential", dpe="D",
                      lat=48.83, lng=2.35, construction_year=1880),
        make_building("b10", name="India", city="Clichy", usage="office", dpe="A",
                      lat=48.90, lng=2.31, construction_year=2015),
        make_building("b11", name="Juliet", city="Paris", usage="residential", dpe="X",
                      lat=48.85, lng=2.35, construction_year=1990),
    ]
