"""
Trace recording and console formatting.

TraceRecorder stores one dict per recorded event, optionally streams them to
a JSON Lines file, and in verbose mode prints a compact line per event.
"""

import json
from typing import Any, TextIO

from .utils import format_state_line


class TraceRecorder:
    """
    Records traces of cipher execution.

    Supports:
    - JSON Lines file output  (when trace_file is set)
    - Compact verbose stdout  (when verbose is True)
    """

    def __init__(self, verbose: bool = False, trace_file: TextIO | None = None):
        self.verbose = verbose
        self.trace_file = trace_file
        self._records: list[dict[str, Any]] = []

    def record(self, **kwargs) -> None:
        """Record a trace entry."""
        self._records.append(kwargs)

        if self.trace_file:
            self._write_jsonl(kwargs)

        if self.verbose:
            self._print_verbose(kwargs)

    def _write_jsonl(self, record: dict[str, Any]) -> None:
        serializable = self._make_serializable(record)
        self.trace_file.write(json.dumps(serializable) + "\n")
        self.trace_file.flush()

    def _make_serializable(self, obj: Any) -> Any:
        if isinstance(obj, dict):
            return {k: self._make_serializable(v) for k, v in obj.items()}
        elif isinstance(obj, (list, tuple)):
            return [self._make_serializable(item) for item in obj]
        elif isinstance(obj, bytes):
            return obj.hex()
        else:
            return obj

    def _print_verbose(self, record: dict[str, Any]) -> None:
        block = record.get("block")
        round_num = record.get("round")
        operation = record.get("operation", "unknown")

        if "state" in record and block is not None:
            state_str = format_state_line(record["state"])
            print(f"B{block:04d} R{round_num:<2}  {operation:40s} STATE:{state_str}")
        else:
            details = " ".join(
                f"{k}={v}" for k, v in record.items() if k != "operation"
            )
            print(f"{operation}: {details}" if details else operation)

    def get_records(self) -> list[dict[str, Any]]:
        return list(self._records)

    def clear(self) -> None:
        self._records.clear()


def print_header(title: str) -> None:
    """Print a section header."""
    print(f"\n{'#'*70}")
    print(f"# {title}")
    print(f"{'#'*70}")


def format_status(passed: bool) -> str:
    """Return the [OK]/[ERROR] verification marker."""
    return "[OK] PASS" if passed else "[ERROR] FAIL"
