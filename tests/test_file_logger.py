import json
import logging

from file_logger import log_trace
from catalog import CatalogController, CounterIdGenerator
from baseClass import FormDraft
from conftest import FakeStore


def _traces(caplog):
    return [json.loads(r.getMessage()) for r in caplog.records if r.name == "trace_logger"]


def test_log_trace_writes_json(caplog):
    with caplog.at_level(logging.INFO, logger="trace_logger"):
        log_trace("add", "7", name="Mug")
    (trace,) = _traces(caplog)
    assert trace["action"] == "add"
    assert trace["product_id"] == "7"
    assert trace["name"] == "Mug"
    assert "datetime" in trace


def test_mutations_are_traced(caplog):
    c = CatalogController(FakeStore(), id_generator=CounterIdGenerator())
    with caplog.at_level(logging.INFO, logger="trace_logger"):
        p = c.add(FormDraft(name="Mug", price="9.99", image_url="http://i/mug.png"))
        c.update(p.id, FormDraft(name="Mug", price="12.50", image_url="http://i/mug.png"))
        c.remove(p.id)
        c.remove(p.id)
    assert [t["action"] for t in _traces(caplog)] == ["add", "update", "remove"]
