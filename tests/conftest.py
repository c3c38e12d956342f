import sys

import pytest
from loguru import logger


@pytest.fixture
def log_records():
    """Collect loguru records at WARNING and above."""
    records = []
    handler_id = logger.add(lambda message: records.append(message.record), level="WARNING")
    yield records
    logger.remove(handler_id)


@pytest.fixture
def restore_logging():
    yield
    logger.remove()
    logger.add(sys.stderr)


@pytest.fixture
def write_csv(tmp_path):
    def _write(rows, header="id,reviews.text", name="reviews.csv"):
        path = tmp_path / name
        path.write_text("\n".join([header] + list(rows)) + "\n", encoding="utf-8")
        return path
    return _write
