"""Run metrics writers (JSON and sectioned CSV)."""

from __future__ import annotations

import csv
import json
from pathlib import Path
from typing import Any, Iterator

RUN_SECTION = "run"


def _ensure_outdir(outdir: str | Path) -> Path:
    path = Path(outdir)
    path.mkdir(parents=True, exist_ok=True)
    return path


def _format_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return repr(value)
    if isinstance(value, (list, tuple)):
        return json.dumps(list(value))
    return str(value)


def metric_rows(metrics: dict[str, Any]) -> Iterator[tuple[str, str, str]]:
    """Yield ``(section, key, value)`` rows.

    Top-level mappings such as ``timing`` or ``convergence`` become sections.
    Scalars at the top level are grouped under ``run``. Deeper mappings are
    addressed with dotted keys inside their section.
    """
    for name, value in metrics.items():
        if not isinstance(value, dict):
            yield RUN_SECTION, str(name), _format_value(value)
            continue
        stack: list[tuple[str, Any]] = list(value.items())[::-1]
        while stack:
            key, sub = stack.pop()
            if isinstance(sub, dict):
                stack.extend((f"{key}.{k}", v) for k, v in reversed(list(sub.items())))
            else:
                yield str(name), str(key), _format_value(sub)


def save_metrics_json(metrics: dict[str, Any], outdir: str | Path, filename: str = "metrics.json") -> Path:
    """Save run metrics as indented JSON."""
    path = _ensure_outdir(outdir) / filename
    with path.open("w", encoding="utf-8") as f:
        json.dump(metrics, f, indent=2)
    return path


def save_metrics_csv(metrics: dict[str, Any], outdir: str | Path, filename: str = "metrics.csv") -> Path:
    """Save run metrics with one ``section,key,value`` row per scalar."""
    path = _ensure_outdir(outdir) / filename
    with path.open("w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(["section", "key", "value"])
        writer.writerows(metric_rows(metrics))
    return path
