import pytest
import sys
from pathlib import Path

# Add src to sys.path so we can import report_toolkit
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from report_toolkit.core.models.bands import PredicateBand  # noqa: E402
from report_toolkit.core.models.indicators import PidAssessment  # noqa: E402


# Common test fixtures
@pytest.fixture
def knowledge_bands():
    """Predicate bands sorted highest-first, as the report screens use them."""
    return [
        PredicateBand("A", "Sangat Baik", 91, 100),
        PredicateBand("B", "Baik", 81, 90),
        PredicateBand("C", "Cukup", 71, 80),
        PredicateBand("D", "Perlu Bimbingan", 0, 70),
    ]


@pytest.fixture
def pid_payload() -> dict:
    """Two themes: 2+1 indicators, then a theme with an empty subtheme and 1 indicator."""
    return {
        "id": 3,
        "semester": "1",
        "priode": "triwulan_1",
        "themas": [
            {
                "id": 1,
                "thema": "Diriku",
                "subthemas": [
                    {
                        "id": 10,
                        "subthema": "Tubuhku",
                        "indicators": [
                            {"id": 100, "ic": 1, "indicator": "Menyebutkan anggota tubuh",
                             "domain": "Kognitif", "predicate": "T", "description": "Baik sekali"},
                            {"id": 101, "ic": 2, "indicator": "Merawat kebersihan tubuh",
                             "domain": "Motorik", "predicate": None, "description": None},
                        ],
                    },
                    {
                        "id": 11,
                        "subthema": "Panca Indra",
                        "indicators": [
                            {"id": 102, "ic": 3, "indicator": "Mengenal lima indra",
                             "domain": "Kognitif", "predicate": "C", "description": "Baik sekali"},
                        ],
                    },
                ],
            },
            {
                "id": 2,
                "thema": "Keluargaku",
                "subthemas": [
                    {"id": 20, "subthema": "Rumahku", "indicators": []},
                    {
                        "id": 21,
                        "subthema": "Anggota Keluarga",
                        "indicators": [
                            {"id": 103, "ic": 4, "indicator": "Menyebutkan anggota keluarga",
                             "domain": "Bahasa", "predicate": "I", "description": None},
                        ],
                    },
                ],
            },
        ],
    }


@pytest.fixture
def pid_assessment(pid_payload) -> PidAssessment:
    return PidAssessment.from_dict(pid_payload)


@pytest.fixture
def bare_pid_payload() -> dict:
    """Tree as some report sources send it: titles only, no node ids."""
    return {
        "themas": [
            {
                "thema": "Diriku",
                "subthemas": [
                    {
                        "subthema": "Tubuhku",
                        "indicators": [
                            {"ic": 1, "indicator": "Menyebutkan anggota tubuh",
                             "domain": "Kognitif", "predicate": "T"},
                            {"ic": 2, "indicator": "Merawat kebersihan tubuh",
                             "domain": "Motorik"},
                        ],
                    },
                    {
                        "subthema": "Tubuhku",
                        "indicators": [
                            {"ic": 3, "indicator": "Mengenal lima indra",
                             "domain": "Kognitif", "predicate": "C", "description": "Aktif"},
                        ],
                    },
                ],
            },
        ],
    }
