from __future__ import annotations

from pathlib import Path

import pytest

from starkgw.codec.compression import decompress_program
from starkgw.spec.models import CompiledContract
from starkgw.utils import load_json

REPO_ROOT = Path(__file__).resolve().parents[2]
EXAMPLES_ROOT = REPO_ROOT / "docs" / "examples"
EXAMPLE_PATHS = sorted(EXAMPLES_ROOT.glob("*.json"))


def test_examples_present() -> None:
    assert len(EXAMPLE_PATHS) >= 2


@pytest.mark.parametrize("path", EXAMPLE_PATHS, ids=lambda p: p.stem)
def test_example_deploys_with_lossless_program(path: Path) -> None:
    raw = load_json(path)
    definition = CompiledContract.from_path(path).to_definition()

    assert definition.abi == raw["abi"]
    assert definition.entry_points_by_type == raw["entry_points_by_type"]
    assert definition.program.isascii()
    assert decompress_program(definition.program) == raw["program"]


@pytest.mark.parametrize("path", EXAMPLE_PATHS, ids=lambda p: p.stem)
def test_example_entry_points_are_hex_selectors(path: Path) -> None:
    contract = CompiledContract.from_path(path)
    for entry_points in contract.entry_points_by_type.values():
        for entry_point in entry_points:
            assert entry_point["selector"].startswith("0x")
            assert int(entry_point["selector"], 16) < 2**250
