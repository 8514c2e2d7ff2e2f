import pathlib

import pytest


@pytest.fixture(scope="session")
def DATA_DIR() -> pathlib.Path:
    return pathlib.Path(__file__).parent / "data"


@pytest.fixture
def write_dataset(tmp_path):
    """returns a function writing text to a file in a temporary directory"""

    def write(text: str, name: str = "dataset.txt") -> pathlib.Path:
        path = tmp_path / name
        path.write_text(text)
        return path

    return write
