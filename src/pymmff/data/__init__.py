"""Bundled parameter data."""
from pathlib import Path

DATA_DIR = Path(__file__).resolve().parent


def sample_parameters_path() -> Path:
    """Path of the bundled MMFF94 parameter subset."""
    return DATA_DIR / "mmff94_sample.prm"
