import logging

import pytest

from abc_analyzer.core import sdk
from fakes import FakeAlembic


@pytest.fixture
def fake_alembic(monkeypatch):
    fake = FakeAlembic()
    monkeypatch.setattr(sdk, "import_alembic_module", fake.modules)
    return fake


@pytest.fixture(autouse=True)
def _reset_package_logger():
    yield
    logger = logging.getLogger("abc_analyzer")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
