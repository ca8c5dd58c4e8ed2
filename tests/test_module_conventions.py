from __future__ import annotations

import importlib
import re
from pathlib import Path

import pytest

PACKAGE_ROOT = Path("gridlattice")


def _module_name(path: Path) -> str:
    parts = list(path.with_suffix("").parts)
    if parts[-1] == "__init__":
        parts.pop()
    return ".".join(parts)


PACKAGE_FILES = sorted(PACKAGE_ROOT.rglob("*.py"))


@pytest.mark.parametrize("path", PACKAGE_FILES, ids=_module_name)
def test_module_exports_resolve(path: Path) -> None:
    module = importlib.import_module(_module_name(path))
    exported = getattr(module, "__all__", None)
    assert exported, f"{module.__name__} does not declare __all__"
    assert len(set(exported)) == len(exported)
    missing = [name for name in exported if not hasattr(module, name)]
    assert not missing, f"{module.__name__} exports undefined names: {missing}"


@pytest.mark.parametrize(
    "path", [p for p in PACKAGE_FILES if p.name != "__init__.py"], ids=_module_name
)
def test_modules_postpone_annotation_evaluation(path: Path) -> None:
    assert "from __future__ import annotations" in path.read_text(encoding="utf-8")


def test_public_types_reach_the_package_root() -> None:
    import gridlattice
    from gridlattice import hexgrid, triangle

    for subpackage in (hexgrid, triangle):
        for name in subpackage.__all__:
            if name[0].isupper():
                assert name in gridlattice.__all__, name


def test_optional_is_spelled_with_pep604_unions() -> None:
    disallowed = [
        re.compile(r"\bOptional\["),
        re.compile(r"\btyping\.Optional\b"),
        re.compile(r"\bUnion\[[^\]]*\bNone\b"),
    ]
    offending: dict[str, list[str]] = {}
    for root in (PACKAGE_ROOT, Path("examples")):
        for path in root.rglob("*.py"):
            text = path.read_text(encoding="utf-8")
            matches = [pattern.pattern for pattern in disallowed if pattern.search(text)]
            if matches:
                offending[str(path)] = matches
    assert not offending, f"PEP 604 violations detected: {offending}"
