import pytest

from ridematch.domain.area_index import AreaIndex
from ridematch.domain.distance_table import DistanceTable
from ridematch.domain.evaluation import route_cost_fn

DEPOT = "D"

PEOPLE_AREAS_CSV = """\
A,k1,a2
B,k2
"""

DISTANCE_MATRIX_CSV = """\
From/To,D,A,B
D,0,2,3
A,2,0,5
B,3,5,0
"""


@pytest.fixture
def data_dir(tmp_path):
    (tmp_path / "people_areas.csv").write_text(PEOPLE_AREAS_CSV, encoding="utf-8")
    (tmp_path / "distance_matrix.csv").write_text(DISTANCE_MATRIX_CSV, encoding="utf-8")
    return tmp_path


@pytest.fixture
def swap_world():
    """Two kid-drivers whose passengers live next to the other driver's home."""
    areas = {"HA": ["dA"], "HB": ["dB"], "X": ["p1"], "Y": ["p2"]}
    distances = DistanceTable({
        "D": {"X": 1, "Y": 1},
        "X": {"HA": 10, "HB": 1},
        "Y": {"HA": 1, "HB": 10},
    })
    index = AreaIndex(areas)
    return areas, distances, route_cost_fn(index, distances, DEPOT)
