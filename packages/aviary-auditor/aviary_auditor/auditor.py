"""Core logic of the flock auditor."""

from __future__ import annotations

import logging
import traceback
from collections import Counter
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Sequence, Tuple

from aviary_core import Check, capabilities_of, check_registry, resolve_callable, type_key

logger = logging.getLogger(__name__)


class AuditStatus(Enum):
    OK = "OK"
    VIOLATION = "VIOLATION"
    ERROR = "ERROR"
    MISSING = "MISSING"


@dataclass(frozen=True)
class AuditResult:
    bird: str
    status: AuditStatus
    message: str | None = None
    detail: str | None = None


@dataclass(frozen=True)
class AuditSummary:
    total: int
    ok: int
    violation: int
    error: int
    missing: int

    @property
    def exit_code(self) -> int:
        return 1 if (self.violation > 0 or self.error > 0) else 0


@dataclass(frozen=True)
class AuditReport:
    results: Tuple[AuditResult, ...]
    summary: AuditSummary


class CheckViolationError(RuntimeError):
    def __init__(self, target: str, message: str) -> None:
        super().__init__(message)
        self.target = target


class CheckExecutionError(RuntimeError):
    def __init__(self, target: str, message: str, detail: str) -> None:
        super().__init__(message)
        self.target = target
        self.detail = detail


def audit(birds: Iterable[object]) -> AuditReport:
    """Run every registered check against each bird."""

    results = tuple(_evaluate_bird(bird) for bird in birds)
    summary = _build_summary(results)
    logger.info(
        "audited %d birds: ok=%d violation=%d error=%d missing=%d",
        summary.total,
        summary.ok,
        summary.violation,
        summary.error,
        summary.missing,
    )
    return AuditReport(results=results, summary=summary)


def checks_for(bird: object) -> Tuple[Check, ...]:
    """Checks registered for the bird's type and capabilities, specific first."""

    found: list[Check] = []
    for capability in capabilities_of(bird):
        for check in check_registry.resolve(type_key(capability)):
            if check not in found:
                found.append(check)
    return tuple(found)


def describe(bird: object) -> str:
    label = type(bird).__name__
    name = getattr(bird, "name", None)
    if name is None:
        return label
    return f"{label}({name!r})"


def _evaluate_bird(bird: object) -> AuditResult:
    label = describe(bird)
    checks = checks_for(bird)
    if not checks:
        return AuditResult(
            bird=label,
            status=AuditStatus.MISSING,
            message=f"no checks registered for {type_key(type(bird))}",
        )

    try:
        _run_checks(checks, bird)
    except CheckViolationError as exc:
        return AuditResult(
            bird=label,
            status=AuditStatus.VIOLATION,
            message=f"{exc.target}: {exc}",
        )
    except CheckExecutionError as exc:
        return AuditResult(
            bird=label,
            status=AuditStatus.ERROR,
            message=f"{exc.target}: {exc}",
            detail=exc.detail,
        )
    return AuditResult(bird=label, status=AuditStatus.OK)


def _run_checks(checks: Sequence[Check], bird: object) -> None:
    for check in checks:
        try:
            check_func = resolve_callable(check)
        except LookupError as exc:
            raise CheckExecutionError(
                check.target, str(exc), traceback.format_exc()
            ) from exc
        logger.debug("running %s on %s", check.target, type(bird).__name__)
        try:
            check_func(bird)
        except (AssertionError, ValueError) as exc:
            raise CheckViolationError(check.target, str(exc)) from exc
        except Exception as exc:
            detail = traceback.format_exc()
            raise CheckExecutionError(
                check.target,
                f"{exc.__class__.__name__}: {exc}",
                detail,
            ) from exc


def _build_summary(results: Iterable[AuditResult]) -> AuditSummary:
    counts = Counter(result.status for result in results)
    return AuditSummary(
        total=sum(counts.values()),
        ok=counts[AuditStatus.OK],
        violation=counts[AuditStatus.VIOLATION],
        error=counts[AuditStatus.ERROR],
        missing=counts[AuditStatus.MISSING],
    )


__all__ = [
    "AuditReport",
    "AuditResult",
    "AuditStatus",
    "AuditSummary",
    "audit",
    "checks_for",
]
