"""aviary-auditor: runs registered checks against a flock."""

from .auditor import AuditReport, AuditResult, AuditStatus, AuditSummary, audit, checks_for
from .report import render_json, render_table, render_text, to_frame

__all__ = [
    "AuditReport",
    "AuditResult",
    "AuditStatus",
    "AuditSummary",
    "audit",
    "checks_for",
    "render_json",
    "render_table",
    "render_text",
    "to_frame",
]
