import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parent.parent
SOURCES = ROOT / "src" / "py"
if str(SOURCES) not in sys.path:
	sys.path.insert(0, str(SOURCES))

TEST_DATA = Path(__file__).absolute().parent / "data"


@pytest.fixture
def golden():
	"""Returns the bytes of a file in `tests/data`."""

	def load(name: str) -> bytes:
		return (TEST_DATA / name).read_bytes()

	return load


# EOF
