import logging

from decayengine.log import setup_logging
from decayengine.store import DoseStore


def test_setup_logging_is_idempotent():
    logger = setup_logging(logging.DEBUG)
    setup_logging(logging.DEBUG)
    assert len(logger.handlers) == 1
    assert logger.level == logging.DEBUG


def test_store_writes_are_logged(caplog):
    store = DoseStore()
    with caplog.at_level(logging.INFO, logger="decayengine"):
        dose = store.submit("5", "mg", "2024-01-01T10:00")
        store.remove(dose.dose_id)
    messages = [r.getMessage() for r in caplog.records]
    assert any("Added dose" in m for m in messages)
    assert any("Removed dose" in m for m in messages)
