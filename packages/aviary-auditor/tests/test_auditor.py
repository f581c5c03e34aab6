from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

import yaml
from click.testing import CliRunner

from aviary_auditor import (
    AuditStatus,
    audit,
    checks_for,
    render_json,
    render_table,
    render_text,
    to_frame,
)
from aviary_auditor.__main__ import cli, main
from aviary_birds import FlappyBird, Penguin, SwiftBird, UnladenSwallow, bunch_of_birds
from aviary_core import Bird, Check, register_check

DEMO_FLOCK_SIZE = 6


@dataclass(frozen=True)
class Kiwi(Bird):
    name: str

    @property
    def can_fly(self) -> bool:
        return False


def test_audit_demo_flock() -> None:
    report = audit(bunch_of_birds())

    assert report.summary.total == DEMO_FLOCK_SIZE
    assert report.summary.ok == DEMO_FLOCK_SIZE - 1
    assert report.summary.error == 1
    assert report.summary.exit_code == 1

    statuses = {result.bird: result.status for result in report.results}
    assert statuses["UnladenSwallow('African')"] is AuditStatus.OK
    assert statuses["Penguin('King Penguin')"] is AuditStatus.OK
    unknown = statuses["UnladenSwallow('What do you mean? African or European?')"]
    assert unknown is AuditStatus.ERROR


def test_unknown_swallow_error_names_the_check() -> None:
    (result,) = audit([UnladenSwallow.UNKNOWN]).results

    assert result.status is AuditStatus.ERROR
    assert result.message is not None
    assert result.message.startswith("aviary_core.checks.check_airspeed_velocity")
    assert "UnsupportedVariantError" in result.message
    assert result.detail is not None


def test_audit_reports_violation() -> None:
    report = audit([FlappyBird(name="Backwards", amplitude=-1.0, frequency=2.0)])

    (result,) = report.results
    assert result.status is AuditStatus.VIOLATION
    assert result.message is not None
    assert "check_flappy_bird_parameters" in result.message
    assert report.summary.exit_code == 1


def test_audit_reports_missing_checks() -> None:
    report = audit([object()])

    (result,) = report.results
    assert result.status is AuditStatus.MISSING
    assert report.summary.missing == 1
    assert report.summary.exit_code == 0


def test_audit_unresolvable_check_is_error() -> None:
    register_check("aviary_core.capabilities.Bird", Check("aviary_birds.nowhere.check"))

    (result,) = audit([Kiwi(name="Kiwi")]).results

    assert result.status is AuditStatus.ERROR


def test_checks_for_orders_specific_before_generic() -> None:
    targets = [check.target for check in checks_for(SwiftBird(version=2.0))]

    assert targets == [
        "aviary_birds.checks.check_swift_version",
        "aviary_core.checks.check_bird_name",
        "aviary_core.checks.check_can_fly_consistent",
        "aviary_core.checks.check_airspeed_velocity",
    ]
    assert len(checks_for(Penguin(name="King Penguin"))) == 2


def test_render_text_and_json() -> None:
    report = audit([Penguin(name="King Penguin")])

    text = render_text(report)
    assert "[OK] Penguin('King Penguin')" in text
    assert "Summary: total=1 ok=1" in text

    payload = json.loads(render_json(report))
    assert payload["summary"]["ok"] == 1
    assert payload["results"][0]["status"] == "OK"


def test_render_table() -> None:
    report = audit([Penguin(name="King Penguin"), UnladenSwallow.UNKNOWN])

    frame = to_frame(report)
    assert list(frame.columns) == ["bird", "status", "message"]
    assert list(frame["status"]) == ["OK", "ERROR"]

    table = render_table(report)
    assert "King Penguin" in table
    assert table.endswith("error=1 missing=0")


def test_render_empty_report() -> None:
    report = audit([])

    assert render_text(report).startswith("No birds to audit.")
    assert render_table(report).startswith("No birds to audit.")


def test_cli_default_flock_exit_code() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["--format", "text"])

    assert result.exit_code == 1
    assert "[ERROR]" in result.output
    assert "Summary: total=6" in result.output


def test_cli_json_for_config_flyers(tmp_path: Path) -> None:
    config_path = tmp_path / "flyers.yaml"
    with open(config_path, "w", encoding="utf-8") as f:
        yaml.safe_dump(
            {
                "flock": {
                    "birds": [{"kind": "penguin", "name": "King Penguin"}],
                    "flyers": [
                        {"kind": "unladen_swallow", "variant": "african"},
                        {"kind": "swift_bird", "version": 2.0},
                    ],
                }
            },
            f,
        )

    runner = CliRunner()
    result = runner.invoke(cli, [str(config_path), "--flyers", "--format", "json"])

    assert result.exit_code == 0
    payload = json.loads(result.output)
    assert payload["summary"] == {
        "total": 2,
        "ok": 2,
        "violation": 0,
        "error": 0,
        "missing": 0,
    }


def test_main_reports_bad_config(tmp_path: Path) -> None:
    config_path = tmp_path / "bad.yaml"
    config_path.write_text("flock:\n  birds:\n    - kind: dragon\n", encoding="utf-8")

    assert main([str(config_path)]) == 1


def test_main_returns_report_exit_code(tmp_path: Path) -> None:
    config_path = tmp_path / "ok.yaml"
    config_path.write_text(
        "flock:\n  birds:\n    - kind: penguin\n      name: King Penguin\n",
        encoding="utf-8",
    )

    assert main([str(config_path)]) == 0
