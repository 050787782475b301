"""pytest-benchmark configuration for rletext benchmarks."""

from pathlib import Path

import pytest


@pytest.fixture(scope="session")
def samples_dir() -> Path:
    """Return the path to the samples directory."""
    return Path(__file__).parent.parent / "samples"


@pytest.fixture(scope="session")
def glider_rle(samples_dir: Path) -> Path:
    """Return path to glider.rle - minimal pattern with comments and header."""
    return samples_dir / "glider.rle"


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest-benchmark with custom settings."""
    # Set benchmark defaults
    config.option.benchmark_min_rounds = 5
    config.option.benchmark_warmup = True
    config.option.benchmark_warmup_iterations = 3

    # Create benchmarks directory for JSON exports
    benchmark_dir = Path(__file__).parent.parent / ".benchmarks"
    benchmark_dir.mkdir(exist_ok=True)
