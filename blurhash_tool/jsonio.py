# blurhash_tool/jsonio.py
"""Machine-readable stdout payloads for --json runs."""
from __future__ import annotations
import json, logging, sys
from typing import Any, Dict, Optional

from .models.summary import RunSummary

def enable_json_logging():
    """Route logs to stderr at ERROR level so stdout carries only the payload."""
    for h in logging.root.handlers[:]:
        logging.root.removeHandler(h)
    logging.basicConfig(stream=sys.stderr, level=logging.ERROR,
                        format="%(asctime)s [%(levelname)s] %(message)s")

def _emit(payload: Dict[str, Any]) -> None:
    sys.stdout.write(json.dumps(payload, ensure_ascii=False) + "\n")
    sys.stdout.flush()

def success(command: str, summary: RunSummary, code: int = 0) -> int:
    _emit({"result": "success", "command": command, "data": summary.to_dict()})
    return code

def error(command: str, message: str, exception_type: Optional[str] = None, code: int = 1) -> int:
    payload: Dict[str, Any] = {"result": "error", "command": command, "error": message}
    if exception_type:
        payload["debug"] = {"exception_type": exception_type}
    _emit(payload)
    return code
