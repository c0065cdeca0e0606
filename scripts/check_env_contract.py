#!/usr/bin/env python3
"""Verify that .env.example documents exactly the keys app/settings.py reads."""
from __future__ import annotations

import ast
from dataclasses import dataclass
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
SETTINGS_PATH = ROOT / "app" / "settings.py"
ENV_EXAMPLE_PATH = ROOT / ".env.example"

SETTINGS_ENV_READERS = {"os.getenv", "_env_bool", "_env_int", "_env_str"}


@dataclass(frozen=True)
class ContractReport:
    missing: tuple[str, ...]
    unknown: tuple[str, ...]
    duplicates: tuple[str, ...]

    @property
    def ok(self) -> bool:
        return not (self.missing or self.unknown or self.duplicates)


def _reader_name(call: ast.Call) -> str | None:
    func = call.func
    if isinstance(func, ast.Name):
        return func.id
    if isinstance(func, ast.Attribute) and isinstance(func.value, ast.Name):
        return f"{func.value.id}.{func.attr}"
    return None


def settings_env_keys(source: str) -> set[str]:
    keys: set[str] = set()
    for node in ast.walk(ast.parse(source)):
        if not isinstance(node, ast.Call) or _reader_name(node) not in SETTINGS_ENV_READERS:
            continue
        if node.args and isinstance(node.args[0], ast.Constant) and isinstance(node.args[0].value, str):
            keys.add(node.args[0].value)
    return keys


def env_example_keys(text: str) -> tuple[set[str], set[str]]:
    keys: set[str] = set()
    duplicates: set[str] = set()
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key = line.split("=", 1)[0].strip()
        if not key:
            continue
        if key in keys:
            duplicates.add(key)
        keys.add(key)
    return keys, duplicates


def check_contract(settings_source: str, env_example_text: str) -> ContractReport:
    settings_keys = settings_env_keys(settings_source)
    example_keys, duplicates = env_example_keys(env_example_text)
    return ContractReport(
        missing=tuple(sorted(settings_keys - example_keys)),
        unknown=tuple(sorted(example_keys - settings_keys)),
        duplicates=tuple(sorted(duplicates)),
    )


def main() -> int:
    report = check_contract(
        SETTINGS_PATH.read_text(encoding="utf-8"),
        ENV_EXAMPLE_PATH.read_text(encoding="utf-8"),
    )
    if report.ok:
        print("Environment contract check passed.")
        return 0

    print("Environment contract check failed.")
    for title, names in (
        ("Missing from .env.example:", report.missing),
        ("Not read by app/settings.py:", report.unknown),
        ("Duplicated in .env.example:", report.duplicates),
    ):
        if names:
            print(title)
            for name in names:
                print(f"- {name}")
    return 1


if __name__ == "__main__":
    sys.exit(main())
