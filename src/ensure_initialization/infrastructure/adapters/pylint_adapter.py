import os
import re
import subprocess
import sys
from collections import defaultdict

from ensure_initialization.domain.config import ConfigurationLoader
from ensure_initialization.domain.constants import INITIALIZATION_SYMBOL, PLUGIN_MODULE
from ensure_initialization.domain.entities import LinterResult
from ensure_initialization.domain.protocols import LinterAdapterProtocol


class PylintAdapter(LinterAdapterProtocol):
    """Runs pylint with only the initialization checker enabled and parses its output."""

    LINTER = "pylint"
    ERROR_CODE = "PYLINT_ERROR"
    # Pylint exit status bits: 1 fatal, 32 usage error.
    FAILURE_BITS = 1 | 32

    def __init__(self, config_loader: ConfigurationLoader) -> None:
        self._config_loader = config_loader

    def build_command(self, target_path: str) -> list[str]:
        """Pylint command line for target_path."""
        cmd = [
            sys.executable,
            "-m",
            "pylint",
            target_path,
            f"--load-plugins={PLUGIN_MODULE}",
            "--disable=all",
            f"--enable={INITIALIZATION_SYMBOL}",
            "--score=n",
            "--msg-template={path}:{line}: {msg_id}: {msg}",
        ]
        exclude = self._config_loader.exclude_paths
        if exclude:
            regex = ",".join(rf".*{re.escape(p)}.*" for p in exclude)
            cmd.append(f"--ignore-paths={regex}")
        return cmd

    def gather_results(self, target_path: str) -> list[LinterResult]:
        """Run pylint with the plugin and gather results."""
        env = os.environ.copy()
        try:
            result = subprocess.run(
                self.build_command(target_path),
                env=env,
                capture_output=True,
                text=True,
                check=False,
            )
        except (OSError, subprocess.SubprocessError) as e:
            return [LinterResult(self.ERROR_CODE, str(e), [])]
        results = self._parse_output(result.stdout or "")
        if not results and result.returncode & self.FAILURE_BITS:
            detail = (result.stderr or result.stdout or "").strip()
            return [LinterResult(self.ERROR_CODE, detail or f"pylint exited with {result.returncode}", [])]
        return results

    def _parse_output(self, output: str) -> list[LinterResult]:
        # Pattern: path:line: msg_id: msg
        pattern = re.compile(r"^(.*?):(\d+): ([A-Z]\d{4}): (.*)$")
        collected: dict[tuple[str, str], list[str]] = defaultdict(list)
        for line in output.splitlines():
            match = pattern.match(line)
            if not match:
                continue
            file_path, line_num, msg_id, message = match.groups()
            collected[(msg_id, message.strip())].append(f"{file_path}:{line_num}")
        return [
            LinterResult(code, message, sorted(locations))
            for (code, message), locations in sorted(collected.items())
        ]
