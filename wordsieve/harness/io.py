"""
I/O utilities for replay runs.

- write_csv:      flatten per-secret replay results into a tidy CSV (one row per secret).
- write_manifest: dump a JSON manifest with config and dictionary report.
- timestamp_id:   stable UTC run ID string.

Patterns are prefixed with an apostrophe to keep spreadsheet apps from
interpreting strings like "-GYY-" as formulas.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List
import csv
import json
import datetime as dt


def _excel_safe_pattern(patt: str) -> str:
    """"-GYY-" -> "'-GYY-" """
    return "'" + patt if patt else patt


def write_csv(results: List[Dict], path: str, max_steps: int) -> str:
    """
    Serialize a batch of replay results to CSV.

    Columns:
      secret, solved, steps, time_ms,
      guess_1, patt_1, left_1, ..., guess_<max_steps>, patt_<max_steps>, left_<max_steps>

    Returns the path written.
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    fields = ["secret", "solved", "steps", "time_ms"]
    for i in range(1, max_steps + 1):
        fields += [f"guess_{i}", f"patt_{i}", f"left_{i}"]

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=fields)
        w.writeheader()

        for r in results:
            row = {
                "secret": r["secret"],
                "solved": r["solved"],
                "steps": r["steps"],
                "time_ms": round(float(r["time_ms"]), 3),
            }

            hist = r.get("history", [])
            left = r.get("remaining", [])
            for i in range(1, max_steps + 1):
                if i <= len(hist):
                    g, patt = hist[i - 1]
                    row[f"guess_{i}"] = g
                    row[f"patt_{i}"] = _excel_safe_pattern(patt)
                    row[f"left_{i}"] = left[i - 1] if i <= len(left) else ""
                else:
                    row[f"guess_{i}"] = ""
                    row[f"patt_{i}"] = ""
                    row[f"left_{i}"] = ""

            w.writerow(row)

    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    """
    Write a JSON manifest for a replay run.

    Typical keys: run_id, config (CLI args), wordlist (validate_wordlist
    report), num_cases, mean_remaining.
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2)
    return str(p)


def timestamp_id() -> str:
    """Compact UTC timestamp suitable for filenames, e.g. 20250820T024121Z."""
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")
