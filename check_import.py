#!/usr/bin/env python3
"""Check the integration's Python files compile and measure their import times."""

import importlib
import py_compile
import sys
import time
from pathlib import Path

PACKAGE = "custom_components.youtube_creator_dashboard"

# Leaf modules first, so a failure points at the module that owns it
MODULES = [
    "const",
    "errors",
    "models",
    "token_store",
    "normalizer",
    "executor",
    "authorizer",
    "fetcher",
    "api",
    "summaries",
    "exchange_rate",
    "coordinator",
    "services",
    "sensor",
    "application_credentials",
    "config_flow",
    "__init__",
]


def check_syntax(file_path: Path) -> bool:
    """Return True if ``file_path`` compiles."""
    try:
        py_compile.compile(str(file_path), doraise=True)
    except py_compile.PyCompileError as err:
        print(f"   {err.msg}")
        return False
    return True


def measure_import_time(module_name: str) -> tuple[bool, float]:
    """Import ``module_name`` and return (imported, seconds)."""
    start_time = time.perf_counter()
    try:
        importlib.import_module(module_name)
    except ImportError as err:
        # Home Assistant or google-auth is not installed here
        print(f"   {err}")
        return False, 0.0
    return True, time.perf_counter() - start_time


if __name__ == "__main__":
    print("=" * 70)
    print("YouTube Creator Dashboard - Syntax & Import Timing")
    print("=" * 70)

    root = Path(__file__).parent
    sys.path.insert(0, str(root))
    base_path = root / Path(*PACKAGE.split("."))

    print("\n1. Syntax Check:")
    print("-" * 70)
    syntax_results = []
    for name in MODULES:
        file_path = base_path / f"{name}.py"
        if not file_path.exists():
            print(f"[WARN] {file_path.name:30s} - File not found")
            syntax_results.append(False)
        elif check_syntax(file_path):
            print(f"[OK] {file_path.name:30s} - No syntax errors")
            syntax_results.append(True)
        else:
            print(f"[ERROR] {file_path.name:30s} - Syntax error!")
            syntax_results.append(False)

    print("\n2. Import Timing:")
    print("-" * 70)
    for name in MODULES:
        module_name = PACKAGE if name == "__init__" else f"{PACKAGE}.{name}"
        imported, elapsed = measure_import_time(module_name)
        if not imported:
            print(f"[SKIP] {name:30s} - Dependencies missing")
        else:
            status = "SLOW" if elapsed > 0.1 else "OK"
            print(f"[{status}] {name:30s} - {elapsed * 1000:6.2f} ms")

    print("\n" + "=" * 70)
    if all(syntax_results):
        print("[OK] ALL FILES PASSED SYNTAX CHECK")
        sys.exit(0)
    print("[ERROR] SOME FILES HAVE SYNTAX ERRORS")
    sys.exit(1)
