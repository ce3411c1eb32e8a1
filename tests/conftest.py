"""Pytest configuration and shared astroid fixtures.

Run pytest from this project's root. pythonpath in pyproject.toml puts src/
and the project root on sys.path so `tests.*` helpers import cleanly.
"""

from pathlib import Path

import astroid

FIXTURES_DIR = Path(__file__).parent / "functional" / "fixtures"
UNITY_ENGINE_SOURCE = (FIXTURES_DIR / "UnityEngine.py").read_text(encoding="utf-8")


def register_stub_module(name: str, source: str) -> astroid.nodes.Module:
    """Parse source as module `name` and make it importable for astroid inference."""
    module = astroid.parse(source, module_name=name)
    astroid.MANAGER.astroid_cache[name] = module
    return module


def register_unity_engine() -> astroid.nodes.Module:
    """Register the engine stub used by the rule's default identities."""
    return register_stub_module("UnityEngine", UNITY_ENGINE_SOURCE)
