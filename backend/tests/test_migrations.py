from __future__ import annotations

import importlib.util
from pathlib import Path

import pytest
import sqlalchemy as sa

from pengluaran.database import Base
from pengluaran.models import *  # noqa: F401, F403

VERSIONS = Path(__file__).resolve().parents[1] / "alembic" / "versions"


class RecordingOps:
    """Stands in for ``alembic.op`` and remembers what a migration does."""

    def __init__(self):
        self.tables: dict[str, set[str]] = {}
        self.dropped: list[str] = []
        self.statements: list[str] = []

    def execute(self, statement):
        self.statements.append(str(statement))

    def create_table(self, name, *items, **kwargs):
        self.tables[name] = {c.name for c in items if isinstance(c, sa.Column)}

    def create_index(self, *args, **kwargs):
        pass

    def drop_table(self, name):
        self.dropped.append(name)


@pytest.fixture()
def initial_schema(monkeypatch: pytest.MonkeyPatch):
    spec = importlib.util.spec_from_file_location(
        "initial_schema", VERSIONS / "001_initial_schema.py"
    )
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    ops = RecordingOps()
    monkeypatch.setattr(module, "op", ops)
    return module, ops


def test_initial_schema_matches_models(initial_schema):
    module, ops = initial_schema

    module.upgrade()

    assert module.revision == "001"
    assert module.down_revision is None
    assert set(ops.tables) == set(Base.metadata.tables)
    for name, table in Base.metadata.tables.items():
        assert ops.tables[name] == set(table.columns.keys()), name
    assert any("transaction_type_enum" in s for s in ops.statements)


def test_initial_schema_downgrade_drops_everything(initial_schema):
    module, ops = initial_schema

    module.downgrade()

    assert ops.dropped == ["transactions", "categories", "users"]
    assert any("DROP TYPE" in s for s in ops.statements)
