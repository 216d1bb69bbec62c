# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
from pathlib import Path

import pytest

DATA_DIR = Path(__file__).with_name("data")


@pytest.fixture
def synology_mib_path() -> Path:
	return DATA_DIR / "SYNOLOGY-DISK-MIB.mib"


@pytest.fixture
def synology_mib(synology_mib_path: Path) -> str:
	return synology_mib_path.read_text(encoding="utf-8")


@pytest.fixture
def example_types_mib_path() -> Path:
	return DATA_DIR / "EXAMPLE-TYPES-MIB.mib"


@pytest.fixture
def example_types_mib(example_types_mib_path: Path) -> str:
	return example_types_mib_path.read_text(encoding="utf-8")
