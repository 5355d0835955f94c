from __future__ import annotations

import importlib
import tempfile
from dataclasses import dataclass
from pathlib import Path

from .deck import run_payload

SMOKE_ITERATIONS = 6


@dataclass
class CheckRow:
    name: str
    ok: bool
    detail: str


@dataclass
class SelfCheckReport:
    rows: list[CheckRow]

    @property
    def ok(self) -> bool:
        return all(row.ok for row in self.rows)

    def to_text(self) -> str:
        lines: list[str] = []
        for row in self.rows:
            status = "OK" if row.ok else "FAIL"
            lines.append(f"[{status}] {row.name}: {row.detail}")
        lines.append(f"overall: {'OK' if self.ok else 'FAIL'}")
        return "\n".join(lines)


def run_selfcheck(*, smoke: bool = True) -> SelfCheckReport:
    rows: list[CheckRow] = []

    for module_name in ("numpy", "scipy", "yaml", "matplotlib"):
        try:
            mod = importlib.import_module(module_name)
            version = getattr(mod, "__version__", "unknown")
            rows.append(CheckRow(module_name, True, f"version={version}"))
        except Exception as exc:
            rows.append(CheckRow(module_name, False, str(exc)))

    if smoke and all(row.ok for row in rows):
        deck = {
            "plate": {"rows": 5, "cols": 5},
            "boundary": {"north": 0.0, "south": 100.0, "east": 100.0, "west": 100.0},
            "solver": {"epsilon": 0.5, "record_history": True},
            "output": {"formats": ["txt", "npy", "png"], "metrics": True},
        }

        try:
            with tempfile.TemporaryDirectory(prefix="heatplate-selfcheck-") as tmp:
                outdir = Path(tmp) / "out"
                state = run_payload(deck, deck_path=Path(tmp) / "_inline_deck.yaml", out_override=outdir)
                expected = [
                    outdir / "plate.txt",
                    outdir / "plate.npy",
                    outdir / "plate.png",
                    outdir / "convergence.csv",
                    outdir / "metrics.json",
                ]
                missing = [str(path.name) for path in expected if not path.exists()]
                if missing:
                    rows.append(CheckRow("smoke", False, f"missing artifacts: {', '.join(missing)}"))
                elif state.report.iterations != SMOKE_ITERATIONS:
                    rows.append(
                        CheckRow(
                            "smoke",
                            False,
                            f"expected {SMOKE_ITERATIONS} sweeps, got {state.report.iterations}",
                        )
                    )
                else:
                    rows.append(
                        CheckRow(
                            "smoke",
                            True,
                            f"grid={state.grid.shape}, sweeps={state.report.iterations}, exports={len(state.exports)}",
                        )
                    )
        except Exception as exc:
            rows.append(CheckRow("smoke", False, str(exc)))

    return SelfCheckReport(rows=rows)
