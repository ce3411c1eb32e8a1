"""Run pylint in-process with the plugin loaded against the fixture module."""

from pylint.lint import Run
from pylint.reporters import CollectingReporter

from ensure_initialization.domain.constants import INITIALIZATION_SYMBOL, PLUGIN_MODULE
from tests.conftest import FIXTURES_DIR


def _expected_lines(path) -> list[int]:
    lines = path.read_text(encoding="utf-8").splitlines()
    return [i for i, line in enumerate(lines, start=1) if "expect: ensure-initialization" in line]


def test_plugin_reports_fixture_violations() -> None:
    target = FIXTURES_DIR / "spawner.py"
    reporter = CollectingReporter()
    Run(
        [
            str(target),
            f"--load-plugins={PLUGIN_MODULE}",
            "--disable=all",
            f"--enable={INITIALIZATION_SYMBOL}",
            "--persistent=n",
            "--score=n",
        ],
        reporter=reporter,
        exit=False,
    )

    found = sorted(m.line for m in reporter.messages if m.symbol == INITIALIZATION_SYMBOL)
    assert found == _expected_lines(target)
    assert all(m.msg_id == "E9601" for m in reporter.messages)
    assert all("'Init'" in m.msg for m in reporter.messages)
