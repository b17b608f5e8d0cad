# tests/arch/test_domain_purity.py
from __future__ import annotations

import ast
from collections.abc import Iterable
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[2]
SRC_ROOT = PROJECT_ROOT / "src" / "spac_compliance"
DOMAIN_ROOT = SRC_ROOT / "domain"

FORBIDDEN_IMPORT_PREFIXES = (
    "logging",
    "os",
    "pydantic",
    "pydantic_settings",
    "typer",
    "spac_compliance.application",
    "spac_compliance.config",
    "spac_compliance.infrastructure",
    "spac_compliance.tasks",
)


def _iter_domain_files() -> Iterable[Path]:
    yield from DOMAIN_ROOT.rglob("*.py")


def _module_name_from_path(path: Path) -> str:
    rel = path.relative_to(SRC_ROOT)
    return "spac_compliance." + ".".join(rel.with_suffix("").parts)


def _is_forbidden(name: str) -> bool:
    return any(name == p or name.startswith(p + ".") for p in FORBIDDEN_IMPORT_PREFIXES)


def test_domain_has_no_io_or_framework_imports() -> None:
    violations: list[str] = []

    for path in _iter_domain_files():
        tree = ast.parse(path.read_text(encoding="utf-8"))
        module_name = _module_name_from_path(path)

        for node in ast.walk(tree):
            if isinstance(node, ast.Import):
                for alias in node.names:
                    if _is_forbidden(alias.name):
                        violations.append(f"{module_name} imports forbidden module {alias.name}")
            elif isinstance(node, ast.ImportFrom) and node.module and _is_forbidden(node.module):
                violations.append(f"{module_name} imports forbidden module {node.module}")

    if violations:
        raise AssertionError("Forbidden imports in domain:\n" + "\n".join(sorted(violations)))


def test_domain_never_reads_the_wall_clock() -> None:
    """Calculators take ``now`` explicitly; ``date.today()`` is for outer layers."""
    violations: list[str] = []

    for path in _iter_domain_files():
        tree = ast.parse(path.read_text(encoding="utf-8"))
        for node in ast.walk(tree):
            if (
                isinstance(node, ast.Attribute)
                and node.attr in {"today", "now", "utcnow"}
                and isinstance(node.value, ast.Name)
                and node.value.id in {"date", "datetime"}
            ):
                violations.append(f"{_module_name_from_path(path)}:{node.lineno}")

    assert not violations, "Wall-clock reads in domain:\n" + "\n".join(violations)
