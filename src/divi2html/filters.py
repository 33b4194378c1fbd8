"""Module filtering and utilities."""

from __future__ import annotations

from typing import Iterable, Literal

from divi2html.parser import calculate_metadata
from divi2html.schemas import DiviModule, ParseResult


def normalize_module_type(name: str) -> str:
    """Normalize a module name for comparison (``Text`` -> ``et_pb_text``)."""
    name = name.strip().lower().replace("-", "_")
    if name and not name.startswith("et_pb_"):
        name = f"et_pb_{name}"
    return name


def filter_modules(
    result: ParseResult,
    *,
    mode: Literal["include", "exclude"] = "exclude",
    selected: Iterable[str] | None = None,
) -> ParseResult:
    """Filter modules by type using include or exclude mode.

    Returns a new result; the input is not modified. In include mode a
    container module that does not match is kept when any of its children
    match. Metadata counts are recomputed, errors are carried over.
    """
    selected_types = {normalize_module_type(name) for name in (selected or []) if name.strip()}
    if not selected_types:
        return result

    def _filter(modules: list[DiviModule]) -> list[DiviModule]:
        kept: list[DiviModule] = []
        for module in modules:
            in_selected = module.type in selected_types
            children = _filter(module.children) if module.children is not None else None
            if mode == "include":
                if in_selected:
                    kept.append(module)
                elif children:
                    kept.append(module.model_copy(update={"children": children}))
            else:
                if in_selected:
                    continue
                kept.append(module.model_copy(update={"children": children}))
        return kept

    filtered = result.model_copy(deep=True)
    for section in filtered.sections:
        for row in section.rows:
            for column in row.columns:
                column.modules = _filter(column.modules)

    filtered.metadata = calculate_metadata(filtered.sections, result.metadata.errors)
    return filtered
