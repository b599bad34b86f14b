from __future__ import annotations

import json
import logging
from pathlib import Path

from workorder.core.logging import configure_logging, get_logger


def test_logs_carry_correlation_id(tmp_path: Path) -> None:
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    try:
        configure_logging(tmp_path, correlation_id="server")
        get_logger("workorder.test", "req-1", workorder_url="https://shop.printavo.com/work_orders/abc").info("Customer created: id=%s", 501)
        logging.getLogger("uvicorn").info("startup")
        for handler in root.handlers:
            handler.flush()

        text_log = next(tmp_path.glob("workorder-*.log")).read_text(encoding="utf-8")
        assert "[req-1] workorder.test: Customer created: id=501" in text_log
        assert "[server] uvicorn: startup" in text_log

        json_lines = next(tmp_path.glob("workorder-*.jsonl")).read_text(encoding="utf-8").splitlines()
        records = [json.loads(line) for line in json_lines]
        assert records[0]["correlation_id"] == "req-1"
        assert records[0]["message"] == "Customer created: id=501"
        assert records[0]["workorder_url"] == "https://shop.printavo.com/work_orders/abc"
    finally:
        for handler in root.handlers:
            handler.close()
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)
