"""DearPyGUI front end for the monitoring workflow.

Run with: `uv run task run` (or `python run_app.py`)
"""

from __future__ import annotations

import argparse
import asyncio
import concurrent.futures
import logging
import threading
from pathlib import Path
from typing import Optional, Sequence

from .capture import CaptureConfig
from .config import DEFAULT_MONITOR_URL, MonitorConfig
from .models import WorkflowSnapshot

logger = logging.getLogger(__name__)


def setup_logging(logs_dir: Path) -> None:
    """Log to logs/app.log and stderr; dump hard crashes to logs/faulthandler.log."""
    import faulthandler

    try:
        logs_dir.mkdir(parents=True, exist_ok=True)
    except OSError:
        pass
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
        handlers=[
            logging.FileHandler(logs_dir / "app.log", encoding="utf-8"),
            logging.StreamHandler(),
        ],
    )
    fh = (logs_dir / "faulthandler.log").open("w")
    faulthandler.enable(fh)


def parse_args(argv: Optional[Sequence[str]] = None) -> MonitorConfig:
    parser = argparse.ArgumentParser(description="Heart rate monitor client")
    parser.add_argument("--url", default=DEFAULT_MONITOR_URL, help="measurement service endpoint")
    parser.add_argument("--timeout", type=float, default=30.0, help="HTTP timeout in seconds")
    parser.add_argument("--device", type=int, default=0, help="camera device index")
    parser.add_argument("--log-dir", type=Path, default=Path("logs"))
    args = parser.parse_args(argv)
    return MonitorConfig(
        url=args.url,
        timeout_sec=args.timeout,
        capture=CaptureConfig(device_index=args.device),
        log_dir=args.log_dir,
    )


class LoopThread:
    """Background thread owning the asyncio loop that runs workflow coroutines."""

    def __init__(self) -> None:
        self.loop = asyncio.new_event_loop()
        self._thread = threading.Thread(target=self._run, daemon=True)

    def _run(self) -> None:
        asyncio.set_event_loop(self.loop)
        self.loop.run_forever()

    def start(self) -> None:
        self._thread.start()

    def submit(self, coro) -> concurrent.futures.Future:
        return asyncio.run_coroutine_threadsafe(coro, self.loop)

    def stop(self) -> None:
        self.loop.call_soon_threadsafe(self.loop.stop)
        self._thread.join(timeout=1.0)


def log_run_outcome(fut: concurrent.futures.Future) -> None:
    """Done-callback for submitted runs; surfaces anything that escaped `start()`."""
    if fut.cancelled():
        logger.warning("monitoring run cancelled")
        return
    exc = fut.exception()
    if exc is not None:
        logger.error("[ERROR] monitoring run crashed", exc_info=exc)


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Launch the monitor window."""
    # Import locally to avoid hard dependency at import time
    import dearpygui.dearpygui as dpg

    from .client import HttpResultFetcher
    from .permission import OpenCVCameraPermission
    from .view import button_label, error_line, result_rows, status_line
    from .workflow import MonitoringWorkflow

    cfg = parse_args(argv)
    setup_logging(cfg.log_dir)

    workflow = MonitoringWorkflow(
        permission=OpenCVCameraPermission(cfg.capture),
        fetcher=HttpResultFetcher(timeout_sec=cfg.timeout_sec),
        url=cfg.url,
    )
    runner = LoopThread()
    runner.start()

    # Latest snapshot (written on the loop thread, read by the UI thread)
    snap_lock = threading.Lock()
    latest: WorkflowSnapshot = workflow.snapshot()
    dirty = True

    def on_change(snap: WorkflowSnapshot) -> None:
        nonlocal latest, dirty
        with snap_lock:
            latest = snap
            dirty = True

    workflow.subscribe(on_change)

    dpg.create_context()
    dpg.create_viewport(title="Heart Rate Monitor", width=640, height=520)
    primary_tag = "primary_window"

    def on_start(sender, app_data, user_data) -> None:
        with snap_lock:
            busy = latest.in_flight
        if busy:
            return
        dpg.configure_item(button_tag, enabled=False)
        fut = runner.submit(workflow.start())
        fut.add_done_callback(log_run_outcome)

    with dpg.window(tag=primary_tag, label="Heart Rate Monitor"):
        dpg.add_text("Heart Rate Monitor")
        button_tag = dpg.add_button(label="Start Monitoring", callback=on_start)
        dpg.add_spacer(height=6)
        status_text = dpg.add_text("")
        error_text = dpg.add_text("", color=(230, 80, 80), show=False)
        dpg.add_spacer(height=6)
        with dpg.group(show=False) as results_group:
            dpg.add_text("Monitoring Results")
            results_table = dpg.add_table(header_row=False)
            dpg.add_table_column(parent=results_table)
            dpg.add_table_column(parent=results_table)

    def render(snap: WorkflowSnapshot) -> None:
        dpg.configure_item(button_tag, label=button_label(snap), enabled=not snap.in_flight)
        dpg.set_value(status_text, status_line(snap))
        err = error_line(snap)
        dpg.set_value(error_text, err or "")
        dpg.configure_item(error_text, show=err is not None)
        dpg.delete_item(results_table, children_only=True, slot=1)
        if snap.result is not None:
            for label, value in result_rows(snap.result):
                with dpg.table_row(parent=results_table):
                    dpg.add_text(f"{label}:")
                    dpg.add_text(value, wrap=420)
        dpg.configure_item(results_group, show=snap.result is not None)

    def ui_update_callback() -> None:
        nonlocal dirty
        with snap_lock:
            if not dirty:
                return
            snap = latest
            dirty = False
        render(snap)

    # Schedule periodic UI updates (~10 Hz) using frame callbacks
    def schedule_ui_updates(interval_frames: int = 6) -> None:
        def _tick() -> None:
            ui_update_callback()
            dpg.set_frame_callback(dpg.get_frame_count() + interval_frames, _tick)

        dpg.set_frame_callback(dpg.get_frame_count() + interval_frames, _tick)

    def on_close() -> None:
        runner.stop()

    dpg.setup_dearpygui()
    dpg.show_viewport()
    dpg.set_primary_window(primary_tag, True)
    dpg.set_exit_callback(on_close)
    schedule_ui_updates()

    dpg.start_dearpygui()
    dpg.destroy_context()


if __name__ == "__main__":  # pragma: no cover - manual entry
    main()
