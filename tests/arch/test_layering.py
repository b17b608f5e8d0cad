# tests/arch/test_layering.py
# Copyright (c)
# SPDX-License-Identifier: MIT
"""Clean Architecture layering guardrail using grimp import graph.

This test builds an import graph for the `spac_compliance` package and
enforces a strict layering policy:

    domain         → may depend only on domain
    application    → may depend on {domain, application}
    infrastructure → may depend on {domain, application, infrastructure}
    tasks          → may depend on every layer

`spac_compliance.config` sits outside the matrix: it reads the domain enums
and is read by the outer ring.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Final

import grimp
from grimp import ImportGraph

ROOT_PACKAGE: Final[str] = "spac_compliance"

# Map from top-level "layer" to the set of layers it is allowed to import.
ALLOWED_DEPENDENCIES: Mapping[str, set[str]] = {
    # Domain is the inner core: it only depends on itself.
    "domain": {"domain"},
    # Application can depend on domain and itself, but not on infra/tasks.
    "application": {"domain", "application"},
    # Infrastructure can depend on everything inward.
    "infrastructure": {"domain", "application", "infrastructure"},
    # Entry points wire everything together.
    "tasks": {"domain", "application", "infrastructure", "tasks"},
}


def _build_graph() -> ImportGraph:
    """Build the import graph for the root package using grimp."""
    return grimp.build_graph(ROOT_PACKAGE)


def _layer_for_module(module_name: str) -> str | None:
    """Infer the logical layer for a module from the first package component.

        spac_compliance.domain.*          → "domain"
        spac_compliance.application.*     → "application"
        spac_compliance.infrastructure.*  → "infrastructure"
        spac_compliance.tasks.*           → "tasks"

    Anything else (e.g. spac_compliance.config) returns None and is ignored.
    """
    if not module_name.startswith(f"{ROOT_PACKAGE}."):
        return None

    rest = module_name[len(ROOT_PACKAGE) + 1 :]
    top = rest.split(".", 1)[0]

    if top in ALLOWED_DEPENDENCIES:
        return top
    return None


def _find_layering_violations(graph: ImportGraph) -> list[str]:
    """Scan the graph and return human-readable layering violations."""
    violations: set[str] = set()

    for importer in sorted(graph.modules):
        importer_layer = _layer_for_module(importer)
        if importer_layer is None:
            continue

        allowed_targets = ALLOWED_DEPENDENCIES[importer_layer]

        for imported in graph.find_modules_directly_imported_by(importer):
            imported_layer = _layer_for_module(imported)
            if imported_layer is None:
                continue

            if imported_layer not in allowed_targets:
                violations.add(
                    f"{importer} ({importer_layer}) -> {imported} ({imported_layer}) "
                    "is not allowed by ALLOWED_DEPENDENCIES"
                )

    return sorted(violations)


def test_layering_respects_clean_architecture() -> None:
    """Ensure that high-level layering rules are respected."""
    graph = _build_graph()
    violations = _find_layering_violations(graph)

    if violations:
        message = "Layering violations detected:\n" + "\n".join(violations)
        raise AssertionError(message)
