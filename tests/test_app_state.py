"""Shell state mirrors catalog lifecycle events."""

from __future__ import annotations

from marquee.app.state import AppState, DataStore
from marquee.shared.core.errors import CatalogLoadError


async def test_successful_load_updates_status(bus, data_store):
    app = AppState(bus)
    await app.initialize()

    await data_store.load_data()
    await bus.wait_until_idle()

    assert app.status_text.value == "4 movies"
    levels = [entry["level"] for entry in app.logs.value]
    assert levels == ["info", "success"]


async def test_failed_load_is_logged_not_shown(bus):
    app = AppState(bus)
    await app.initialize()

    def loader():
        raise CatalogLoadError("bad bundle")

    await DataStore(bus, loader=loader, load_delay=0).load_data()
    await bus.wait_until_idle()

    assert app.status_text.value == "0 movies"
    last = app.logs.value[-1]
    assert last["level"] == "error"
    assert "bad bundle" in last["message"]


async def test_push_log(bus):
    app = AppState(bus)
    await app.initialize()

    await app.push_log("hello", "warning")
    await bus.wait_until_idle()

    assert app.logs.value[-1]["message"] == "hello"
    assert app.logs.value[-1]["level"] == "warning"


async def test_initialize_is_idempotent(bus):
    app = AppState(bus)
    await app.initialize()
    await app.initialize()

    await app.push_log("once")
    await bus.wait_until_idle()

    assert len(app.logs.value) == 1
