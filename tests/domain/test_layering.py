from __future__ import annotations

import ast
from pathlib import Path

import pytest

import crdready

DOMAIN_DIR = Path(crdready.__file__).resolve().parent / "domain"
FORBIDDEN_PREFIXES = (
    "crdready.adapters",
    "crdready.config",
    "crdready.ui",
    "crdready.app",
    "httpx",
    "pydantic",
    "aiolimiter",
)


def _imported_modules(path: Path) -> set[str]:
    modules: set[str] = set()
    for node in ast.walk(ast.parse(path.read_text(encoding="utf-8"))):
        if isinstance(node, ast.Import):
            modules.update(alias.name for alias in node.names)
        elif isinstance(node, ast.ImportFrom) and node.level == 0 and node.module:
            modules.add(node.module)
    return modules


@pytest.mark.parametrize(
    "path",
    sorted(DOMAIN_DIR.rglob("*.py")),
    ids=lambda path: str(path.relative_to(DOMAIN_DIR)),
)
def test_domain_modules_depend_only_on_domain_and_stdlib(path: Path) -> None:
    offending = sorted(
        module
        for module in _imported_modules(path)
        if module.startswith(FORBIDDEN_PREFIXES)
    )

    assert offending == []
