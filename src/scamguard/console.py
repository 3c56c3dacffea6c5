# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from .schemas import AnalysisResult, BatchEntry, BatchSummary, TrendReport

ASCII_BANNER = r"""
  ____                        ____                     _
 / ___|  ___ __ _ _ __ ___   / ___|_   _  __ _ _ __ __| |
 \___ \ / __/ _` | '_ ` _ \ | |  _| | | |/ _` | '__/ _` |
  ___) | (_| (_| | | | | | || |_| | |_| | (_| | | | (_| |
 |____/ \___\__,_|_| |_| |_| \____|\__,_|\__,_|_|  \__,_|
"""

LEVEL_STYLES = {
    "low": "green",
    "medium": "yellow",
    "high": "red",
    "critical": "bold red",
}


@dataclass
class MLConsole:
    enabled: bool = True

    def __post_init__(self) -> None:
        self._console = Console(color_system="auto" if self.enabled else None, soft_wrap=True)

    def banner(self) -> None:
        self._console.print(Panel.fit(ASCII_BANNER.strip("\n"), title="ScamGuard", border_style="cyan"))

    def _status(self, tag: str, style: str, text: str) -> None:
        self._console.print(f"[{style}]{tag:<4}[/{style}] {escape(text)}")

    def info(self, text: str) -> None:
        self._status("INFO", "bold cyan", text)

    def warn(self, text: str) -> None:
        self._status("WARN", "bold yellow", text)

    def success(self, text: str) -> None:
        self._status("OK", "bold green", text)

    def metrics_table(self, metrics: dict[str, float], *, title: str) -> None:
        """Counts print as integers, rates with four decimals, in insertion order."""
        table = Table(title=title)
        table.add_column("Metric", style="bold")
        table.add_column("Value", justify="right")
        for key, value in metrics.items():
            number = float(value)
            table.add_row(key, str(int(number)) if number.is_integer() and number > 1 else f"{number:.4f}")
        self._console.print(table)

    def threshold_table(self, rows: Sequence[dict[str, float]]) -> None:
        table = Table(title="Threshold sweep")
        for column in ("threshold", "precision", "recall", "f1"):
            table.add_column(column, justify="right")
        best = max(rows, key=lambda row: row["f1"], default=None)
        for row in rows:
            cells = [f"{row['threshold']:.2f}", f"{row['precision']:.3f}", f"{row['recall']:.3f}", f"{row['f1']:.3f}"]
            table.add_row(*cells, style="bold green" if row is best else None)
        self._console.print(table)

    def analysis_panel(self, result: AnalysisResult) -> None:
        if result.is_degraded:
            self._console.print(Panel(f"[red]{escape(str(result.error))}[/red]", title="Analysis failed", border_style="red"))
            return
        level = result.risk_level.value if result.risk_level is not None else ("scam" if result.is_scam else "clear")
        style = LEVEL_STYLES.get(level, "red" if result.is_scam else "green")
        lines = [
            f"confidence: [bold]{result.confidence:.3f}[/bold]  verdict: [{style}]{level}[/{style}]",
            f"scam types: {', '.join(result.scam_types) or '-'}",
            f"keywords: {', '.join(result.flagged_keywords) or '-'}",
            f"patterns: {', '.join(result.flagged_patterns) or '-'}",
            f"sentiment: {result.sentiment.score} ({result.sentiment.comparative:+.3f})",
        ]
        if result.risk_factors:
            lines.append(f"red flags: {', '.join(result.risk_factors)}")
        lines.extend(f"- {item}" for item in result.recommendations)
        self._console.print(Panel("\n".join(lines), title=f"{result.origin.value} / model {result.model_version}", border_style=style))

    def batch_table(self, entries: Sequence[BatchEntry], summary: BatchSummary) -> None:
        table = Table(title=f"Batch: {summary.scams_detected} flagged, {summary.legitimate} clear, {summary.failed} failed")
        table.add_column("#", justify="right")
        table.add_column("Confidence", justify="right")
        table.add_column("Flagged")
        table.add_column("Level")
        table.add_column("Scam types")
        for entry in entries:
            result = entry.result
            if entry.error is not None:
                table.add_row(str(entry.index), "-", "-", "-", f"[red]{escape(entry.error)}[/red]")
                continue
            level = result.risk_level.value if result.risk_level is not None else "-"
            table.add_row(
                str(entry.index),
                f"{result.confidence:.3f}",
                "yes" if result.is_flagged else "no",
                level,
                ", ".join(result.scam_types) or "-",
            )
        self._console.print(table)

    def trends_table(self, report: TrendReport) -> None:
        for title, rows in (("Top keywords", report.top_keywords), ("Top scam types", report.top_scam_types)):
            table = Table(title=f"{title} ({report.total_results} results)")
            table.add_column("Term", style="bold")
            table.add_column("Count", justify="right")
            for term, count in rows:
                table.add_row(term, str(count))
            self._console.print(table)
