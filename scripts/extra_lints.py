#!/usr/bin/env python3
"""Project-specific lint rules for vose-alias.

Rules:
1. No class-based tests in test files (use module-level functions)
2. No imports inside library functions
3. No mutable default arguments
4. No print() statements in library code (use logging)
5. No TODO/FIXME comments without issue references
6. No global ``random`` in library code outside random_source.py
   (samplers take an injected RandomSource)

Usage: python scripts/extra_lints.py [PATH ...]
"""

import ast
import re
import sys
from dataclasses import dataclass
from pathlib import Path

RANDOM_SOURCE_MODULE = "random_source.py"


@dataclass
class LintError:
    file: Path
    line: int
    column: int
    rule: str
    message: str

    def __str__(self) -> str:
        return f"{self.file}:{self.line}:{self.column}: {self.rule}: {self.message}"


class LintVisitor(ast.NodeVisitor):
    """AST visitor that checks for lint violations."""

    def __init__(self, file: Path) -> None:
        self.file = file
        self.errors: list[LintError] = []
        self._is_test_file = file.name.startswith("test_")
        self._may_use_global_random = (
            self._is_test_file or file.name == RANDOM_SOURCE_MODULE
        )
        self._function_depth = 0

    def _add_error(self, node: ast.AST, rule: str, message: str) -> None:
        lineno = getattr(node, "lineno", 0)
        col_offset = getattr(node, "col_offset", 0)
        self.errors.append(LintError(self.file, lineno, col_offset, rule, message))

    def visit_ClassDef(self, node: ast.ClassDef) -> None:
        # Rule 1, with an exception for Hypothesis state machine TestCases
        if self._is_test_file and node.name.startswith("Test"):
            is_hypothesis_stateful = any(
                isinstance(base, ast.Attribute) and base.attr == "TestCase"
                for base in node.bases
            )
            if not is_hypothesis_stateful:
                msg = f"Class-based test '{node.name}' found. Use functions."
                self._add_error(node, "no-class-tests", msg)
        self.generic_visit(node)

    def _visit_function(self, node: ast.FunctionDef | ast.AsyncFunctionDef) -> None:
        self._function_depth += 1
        for default in node.args.defaults + node.args.kw_defaults:
            if default is not None and _is_mutable(default):
                msg = "Mutable default argument. Use None instead."
                self._add_error(default, "mutable-default", msg)
        self.generic_visit(node)
        self._function_depth -= 1

    def visit_FunctionDef(self, node: ast.FunctionDef) -> None:
        self._visit_function(node)

    def visit_AsyncFunctionDef(self, node: ast.AsyncFunctionDef) -> None:
        self._visit_function(node)

    def _check_import_placement(self, node: ast.stmt) -> None:
        if self._function_depth > 0 and not self._is_test_file:
            self._add_error(
                node,
                "import-in-function",
                "Import inside function. Move to module level.",
            )

    def visit_Import(self, node: ast.Import) -> None:
        self._check_import_placement(node)
        if not self._may_use_global_random and any(
            alias.name == "random" for alias in node.names
        ):
            self._add_error(
                node,
                "global-random",
                "Take a RandomSource argument instead of importing random.",
            )
        self.generic_visit(node)

    def visit_ImportFrom(self, node: ast.ImportFrom) -> None:
        self._check_import_placement(node)
        if not self._may_use_global_random and node.module == "random":
            self._add_error(
                node,
                "global-random",
                "Take a RandomSource argument instead of importing from random.",
            )
        self.generic_visit(node)

    def visit_Call(self, node: ast.Call) -> None:
        is_print = isinstance(node.func, ast.Name) and node.func.id == "print"
        if not self._is_test_file and is_print:
            self._add_error(
                node,
                "no-print",
                "Use logging instead of print() in library code.",
            )
        self.generic_visit(node)


def _is_mutable(node: ast.expr) -> bool:
    if isinstance(node, (ast.List, ast.Dict, ast.Set)):
        return True
    return (
        isinstance(node, ast.Call)
        and isinstance(node.func, ast.Name)
        and node.func.id in ("list", "dict", "set")
    )


def check_todo_comments(file: Path, source: str) -> list[LintError]:
    """Rule 5: Check for TODO/FIXME without issue references."""
    errors: list[LintError] = []
    todo_pattern = re.compile(r"#\s*(TODO|FIXME)(?!:\s*\w+-\d+)", re.IGNORECASE)

    for i, line in enumerate(source.splitlines(), 1):
        match = todo_pattern.search(line)
        if match:
            msg = f"{match.group(1)} needs issue reference (e.g., TODO: VOSE-12)."
            errors.append(LintError(file, i, match.start(), "todo-needs-issue", msg))
    return errors


def lint_source(path: Path, source: str) -> list[LintError]:
    """Lint ``source`` as though it were the contents of ``path``."""
    try:
        tree = ast.parse(source)
    except SyntaxError as e:
        return [LintError(path, e.lineno or 0, e.offset or 0, "syntax-error", str(e))]
    visitor = LintVisitor(path)
    visitor.visit(tree)
    return visitor.errors + check_todo_comments(path, source)


def lint_file(path: Path) -> list[LintError]:
    """Lint a single file and return any errors."""
    return lint_source(path, path.read_text())


def main(argv: list[str] | None = None) -> int:
    """Run linting on the given paths, or on src and tests by default."""
    roots = [Path(p) for p in (argv if argv else ["src", "tests"])]
    errors: list[LintError] = []

    for root in roots:
        if not root.exists():
            continue
        files = [root] if root.is_file() else sorted(root.rglob("*.py"))
        for py_file in files:
            errors.extend(lint_file(py_file))

    if errors:
        for error in sorted(errors, key=lambda e: (str(e.file), e.line, e.column)):
            print(error)
        print(f"\nFound {len(errors)} custom lint error(s)")
        return 1

    print("All custom lint checks passed!")
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
