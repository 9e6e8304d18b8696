"""Tests for the seed_store script."""

import importlib.util
import json
from pathlib import Path

import pytest

SCRIPT = Path(__file__).parent.parent / "scripts" / "seed_store.py"


@pytest.fixture(scope="module")
def seed_store():
    spec = importlib.util.spec_from_file_location("seed_store", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


class TestSeedStore:
    """Tests for scripts/seed_store.py."""

    def test_parse_args_defaults(self, seed_store) -> None:
        args = seed_store.parse_args([])

        assert args.data_dir == Path("data")
        assert args.seed == 42
        assert args.demo_orders == 0
        assert args.pretty is False

    def test_writes_collections(self, seed_store, tmp_path: Path, capsys) -> None:
        assert seed_store.main(["--data-dir", str(tmp_path), "--sample-count", "5", "--extra-count", "5"]) == 0

        properties = json.loads((tmp_path / "properties.json").read_text(encoding="utf-8"))
        assert len(properties) == 12
        assert (tmp_path / "apartments.json").exists()
        assert "properties: 12 records" in capsys.readouterr().out

    def test_demo_orders(self, seed_store, tmp_path: Path) -> None:
        seed_store.main(["--data-dir", str(tmp_path), "--demo-orders", "4", "--pretty"])

        text = (tmp_path / "orders.json").read_text(encoding="utf-8")
        orders = json.loads(text)
        assert text.startswith("[\n")
        assert [o["status"] for o in orders] == ["confirmed", "pending", "confirmed", "pending"]
        assert sorted(p.name for p in (tmp_path / "contracts").iterdir()) == sorted(
            f"{o['id']}.txt" for o in orders if o["status"] == "confirmed"
        )
