"""Formatting of audit reports."""

from __future__ import annotations

import json
from typing import Dict

import pandas as pd

from .auditor import AuditReport, AuditResult

TABLE_COLUMNS: tuple[str, ...] = ("bird", "status", "message")


def render_text(report: AuditReport) -> str:
    lines = []
    results = report.results
    if not results:
        lines.append("No birds to audit.")
    else:
        for result in results:
            lines.append(_format_result_line(result))

    lines.append(_format_summary(report))
    return "\n".join(lines)


def render_json(report: AuditReport) -> str:
    payload: Dict[str, object] = {
        "summary": {
            "total": report.summary.total,
            "ok": report.summary.ok,
            "violation": report.summary.violation,
            "error": report.summary.error,
            "missing": report.summary.missing,
        },
        "results": [
            {
                "bird": result.bird,
                "status": result.status.value,
                "message": result.message,
                "detail": result.detail,
            }
            for result in report.results
        ],
    }
    return json.dumps(payload, indent=2, ensure_ascii=False)


def to_frame(report: AuditReport) -> pd.DataFrame:
    """One row per audited bird."""

    rows = [
        {
            "bird": result.bird,
            "status": result.status.value,
            "message": result.message or "",
        }
        for result in report.results
    ]
    return pd.DataFrame(rows, columns=list(TABLE_COLUMNS))


def render_table(report: AuditReport) -> str:
    frame = to_frame(report)
    if frame.empty:
        body = "No birds to audit."
    else:
        body = frame.to_string(index=False)
    return f"{body}\n{_format_summary(report)}"


def _format_summary(report: AuditReport) -> str:
    summary = report.summary
    return (
        "Summary: total={total} ok={ok} violation={violation} "
        "error={error} missing={missing}"
    ).format(
        total=summary.total,
        ok=summary.ok,
        violation=summary.violation,
        error=summary.error,
        missing=summary.missing,
    )


def _format_result_line(result: AuditResult) -> str:
    base = f"[{result.status.value}] {result.bird}"
    if result.message:
        base = f"{base} - {result.message}"
    return base
