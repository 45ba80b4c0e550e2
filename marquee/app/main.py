"""Marquee - Main application entry point."""

from __future__ import annotations

import asyncio
import logging
import logging.handlers
import os
import threading
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

import flet as ft
from marquee.app.state import Store
from marquee.app.ui.layouts.shell import build_shell
from marquee.shared.core.configuration import LoggingConfig, ValidationLevel, get_config
from marquee.shared.core.event_bus import EventBus

logger = logging.getLogger(__name__)

_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def configure_logging(config: LoggingConfig) -> None:
    """Configure the root logger once for the process.

    File handler (optional) logs at the configured level; the console only
    shows ``console_level`` and above.
    """
    level = _LEVELS.get(config.level.upper(), logging.INFO)
    console_level = _LEVELS.get(config.console_level.upper(), logging.WARNING)

    root_logger = logging.getLogger()
    root_logger.setLevel(min(level, console_level))
    root_logger.handlers.clear()

    if config.log_file:
        log_path = Path(config.log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            log_path,
            maxBytes=5 * 1024 * 1024,  # 5MB
            backupCount=3,
            encoding='utf-8',
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        ))
        root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(console_level)
    console_handler.setFormatter(logging.Formatter(
        "%(asctime)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S",
    ))
    root_logger.addHandler(console_handler)

    # Suppress verbose third-party library logs
    logging.getLogger("flet").setLevel(logging.WARNING)
    logging.getLogger("flet_controls").setLevel(logging.WARNING)
    logging.getLogger("flet_transport").setLevel(logging.WARNING)
    logging.getLogger("fletx.core.state").setLevel(logging.CRITICAL)  # Observer errors during shutdown
    logging.getLogger("asyncio").setLevel(logging.WARNING)

    logger.info(f"Logging configured: file={config.log_file or 'disabled'}, console={logging.getLevelName(console_level)}+")


async def init_state(store: Store) -> None:
    """Bind shell state to the bus, then run the one catalog load."""
    await store.app.initialize()
    await store.data.load_data()
    await store.bus.wait_until_idle()


def _run_async_init(store: Store) -> None:
    """Run async initialization in a separate thread with its own event loop."""
    loop = asyncio.new_event_loop()
    asyncio.set_event_loop(loop)
    try:
        loop.run_until_complete(init_state(store))
        logger.info("State initialization completed")
    except Exception:
        logger.exception("Error in async initialization")
    finally:
        pending = asyncio.all_tasks(loop)
        for task in pending:
            task.cancel()
        if pending:
            loop.run_until_complete(asyncio.gather(*pending, return_exceptions=True))
        loop.close()


def main(page: ft.Page) -> None:
    """Main Flet application entry point."""
    logger.info("Initializing Marquee...")
    page.title = "Marquee"

    store = Store.initialize(EventBus(), get_config(ValidationLevel.LENIENT))

    # Build the shell first so the loading indicator shows during the delay
    page.views.clear()
    page.views.append(build_shell(page, store))
    page.update()

    init_thread = threading.Thread(
        target=_run_async_init,
        args=(store,),
        daemon=True,
        name="StateInitThread",
    )
    init_thread.start()


def run(env_file: Optional[Path] = None) -> None:
    """Console-script entry: load .env, configure logging, start the app."""
    load_dotenv(dotenv_path=env_file or Path.cwd() / ".env")
    configure_logging(get_config(ValidationLevel.LENIENT).logging)

    if os.getenv("FLET_WEB_MODE") == "true":
        port = int(os.getenv("FLET_PORT", "8550"))
        logger.info(f"Starting Flet app in WEB mode on port {port}")
        ft.run(main, view=ft.AppView.WEB_BROWSER, port=port, host="127.0.0.1")
    else:
        logger.info("Starting Flet app in DESKTOP mode")
        ft.run(main, view=ft.AppView.FLET_APP)


if __name__ == "__main__":
    run()
