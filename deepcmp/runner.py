"""Fixture runner: compares the left/right pairs stored in a folder of files."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Optional

import yaml

from .engine import Comparator
from .exceptions import ConfigError, FixtureError
from .models import CompareConfig

logger = logging.getLogger(__name__)

FIXTURE_PATTERNS = ("*.json", "*.yaml", "*.yml")


@dataclass
class ScenarioResult:
    """Result of a single fixture."""
    name: str
    fixture_path: str
    passed: bool
    diffs: list[str] = field(default_factory=list)
    expected: Optional[list[str]] = None
    error: Optional[str] = None

    def to_dict(self) -> dict:
        result = {
            "name": self.name,
            "fixture_path": self.fixture_path,
            "passed": self.passed,
            "diffs_count": len(self.diffs),
            "diffs": self.diffs,
        }
        if self.expected is not None:
            result["expected"] = self.expected
        if self.error:
            result["error"] = self.error
        return result


@dataclass
class GlobalReport:
    """Report across all fixtures of a folder."""
    total: int = 0
    passed: int = 0
    failed: int = 0
    scenarios: list[ScenarioResult] = field(default_factory=list)
    timestamp: str = ""

    def __post_init__(self):
        if not self.timestamp:
            self.timestamp = datetime.now(timezone.utc).isoformat().replace('+00:00', 'Z')

    @property
    def pass_rate(self) -> str:
        return f"{(self.passed / self.total * 100):.1f}%" if self.total > 0 else "0.0%"

    def add(self, result: ScenarioResult):
        self.scenarios.append(result)
        self.total += 1
        if result.passed:
            self.passed += 1
        else:
            self.failed += 1

    def to_dict(self) -> dict:
        return {
            "timestamp": self.timestamp,
            "summary": {
                "total_scenarios": self.total,
                "passed": self.passed,
                "failed": self.failed,
                "pass_rate": self.pass_rate
            },
            "scenarios": [s.to_dict() for s in self.scenarios]
        }

    def print_summary(self):
        print(f"\nFixture Results: {self.passed}/{self.total} passed ({self.pass_rate})")
        if self.failed > 0:
            print(f"  Failed: {self.failed}")
            for scenario in self.scenarios:
                if scenario.passed:
                    continue
                print(f"  - {scenario.name}")
                if scenario.error:
                    print(f"      error: {scenario.error}")
                for diff in scenario.diffs:
                    print(f"      {diff}")


def load_document(path: Path) -> Any:
    """Load a JSON or YAML document."""
    with open(path, 'r', encoding="utf-8") as f:
        content = f.read()

    if path.suffix == ".json":
        return json.loads(content)
    return yaml.safe_load(content)


class FixtureRunner:
    """
    Runs every fixture in a folder through the comparator.

    A fixture holds ``left`` and ``right`` plus either ``expected`` (the
    exact list of difference strings) or ``expected_match`` (default
    true). An optional ``config`` mapping overrides the runner's
    settings for that fixture only.

    Usage:
        runner = FixtureRunner("tests/fixtures")
        report = runner.run()
        report.print_summary()
    """

    def __init__(self, folder: str | Path, config: Optional[CompareConfig] = None):
        self.folder = Path(folder)
        self.config = config or CompareConfig()

    def fixture_files(self) -> list[Path]:
        files = set()
        for pattern in FIXTURE_PATTERNS:
            files.update(self.folder.glob(pattern))
        return sorted(files)

    def run_fixture(self, fixture: Any, name: str, fixture_path: str) -> ScenarioResult:
        """Compare one fixture's left and right and check the outcome."""
        try:
            if not isinstance(fixture, dict):
                raise FixtureError(fixture_path, "fixture must be a mapping")
            for key in ("left", "right"):
                if key not in fixture:
                    raise FixtureError(fixture_path, f"missing '{key}'")

            config = CompareConfig.from_dict(fixture.get("config"), base=self.config)
            diffs = Comparator(config).compare(fixture["left"], fixture["right"])
        except (FixtureError, ConfigError) as e:
            logger.error("Fixture %s failed to run: %s", name, e)
            return ScenarioResult(
                name=name,
                fixture_path=fixture_path,
                passed=False,
                error=str(e)
            )

        expected = fixture.get("expected")
        if expected is not None:
            passed = diffs == list(expected)
        else:
            passed = (not diffs) == bool(fixture.get("expected_match", True))

        return ScenarioResult(
            name=name,
            fixture_path=fixture_path,
            passed=passed,
            diffs=diffs,
            expected=list(expected) if expected is not None else None
        )

    def run(self, print_report: bool = True) -> GlobalReport:
        """
        Run all fixtures in the folder.

        Args:
            print_report: Whether to print PASS/FAIL lines and the summary

        Returns:
            GlobalReport with all results
        """
        if not self.folder.exists():
            raise FileNotFoundError(f"Fixture folder not found: {self.folder}")

        report = GlobalReport()

        for fixture_file in self.fixture_files():
            try:
                fixture = load_document(fixture_file)
            except (json.JSONDecodeError, yaml.YAMLError, UnicodeDecodeError) as e:
                result = ScenarioResult(
                    name=fixture_file.stem,
                    fixture_path=str(fixture_file),
                    passed=False,
                    error=f"Failed to parse fixture: {e}"
                )
            else:
                name = fixture_file.stem
                if isinstance(fixture, dict):
                    name = fixture.get("name", name)
                result = self.run_fixture(fixture, name, str(fixture_file))

            report.add(result)
            if print_report:
                print(f"{'PASS' if result.passed else 'FAIL'}: {result.name}")

        if print_report:
            report.print_summary()

        return report


def run_fixtures(
    folder: str | Path,
    config: Optional[CompareConfig] = None,
    print_report: bool = True
) -> GlobalReport:
    """Run all fixtures in a folder."""
    return FixtureRunner(folder, config).run(print_report)
