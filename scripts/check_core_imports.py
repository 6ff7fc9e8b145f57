#!/usr/bin/env python3
"""
Import boundaries for src/documize_mcp/core/:

- core never imports the MCP SDK or the server module; FastMCP wiring
  lives in documize_mcp.server only.
- HTTP goes through the authenticated pipeline: only the pipeline modules
  import httpx, and no module imports another HTTP library.

Exit status 1 lists every violation on stderr.
"""

from __future__ import annotations

import ast
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parent.parent
CORE_DIR = REPO_ROOT / "src" / "documize_mcp" / "core"
CORE_PACKAGE = "documize_mcp.core"

NO_MCP = ("mcp", "fastmcp", "documize_mcp.server")
OTHER_HTTP = ("requests", "aiohttp", "urllib3", "urllib.request", "http.client")
PIPELINE_MODULES = {"auth.py", "client.py", "errors.py"}


def _matches(module: str, prefixes: tuple[str, ...]) -> bool:
    return any(module == p or module.startswith(p + ".") for p in prefixes)


def _module_name(path: Path) -> str:
    rel = path.relative_to(CORE_DIR).with_suffix("")
    parts = [p for p in rel.parts if p != "__init__"]
    return ".".join([CORE_PACKAGE, *parts])


def _resolve(node: ast.ImportFrom, current: str, is_package: bool) -> str:
    if not node.level:
        return node.module or ""
    base = current.split(".")
    drop = node.level - 1 if is_package else node.level
    base = base[: len(base) - drop] if drop else base
    return ".".join(base + ([node.module] if node.module else []))


def imported_modules(path: Path) -> list[str]:
    tree = ast.parse(path.read_text())
    current = _module_name(path) if path.is_relative_to(CORE_DIR) else path.stem
    is_package = path.name == "__init__.py"
    found: list[str] = []
    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            found.extend(alias.name for alias in node.names)
        elif isinstance(node, ast.ImportFrom):
            found.append(_resolve(node, current, is_package))
    return found


def scan_file(path: Path) -> list[str]:
    errors: list[str] = []
    for mod in imported_modules(path):
        if _matches(mod, NO_MCP):
            errors.append(f"{path}: core must not import '{mod}'")
        elif _matches(mod, OTHER_HTTP):
            errors.append(f"{path}: HTTP must go through httpx, not '{mod}'")
        elif _matches(mod, ("httpx",)) and path.name not in PIPELINE_MODULES:
            errors.append(
                f"{path}: '{mod}' outside the request pipeline; use DocumizeClient"
            )
    return errors


def main() -> int:
    violations: list[str] = []
    for py_file in sorted(CORE_DIR.rglob("*.py")):
        violations.extend(scan_file(py_file))

    if violations:
        for v in violations:
            print(v, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
