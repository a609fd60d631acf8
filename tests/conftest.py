import pytest
from loguru import logger


@pytest.fixture
def debug_records():
    """
    Enable chrono_kit logging into an in-memory sink.

    Yields:
        List of formatted debug messages emitted during the test
    """
    records: list[str] = []
    logger.enable("chrono_kit")
    sink_id = logger.add(lambda msg: records.append(msg.record["message"]), level="DEBUG")
    yield records
    logger.remove(sink_id)
    logger.disable("chrono_kit")
