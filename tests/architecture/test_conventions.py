"""
Convention Enforcement Tests.

Tests that catch anti-patterns which import-based layer rules cannot
detect: frozen dataclass conventions, immutable collections, silent
exception swallowing, and interface contracts.
"""

import ast
import inspect
from pathlib import Path

import pytest

SRC_ROOT = Path(__file__).parent.parent.parent / "src" / "jiraflow"


def _frozen_flag(node: ast.ClassDef) -> bool | None:
    """None if the class is not a dataclass, else whether it is frozen."""
    for decorator in node.decorator_list:
        if isinstance(decorator, ast.Name) and decorator.id == "dataclass":
            return False
        if isinstance(decorator, ast.Call):
            func = decorator.func
            if isinstance(func, ast.Name) and func.id == "dataclass":
                for kw in decorator.keywords:
                    if kw.arg == "frozen" and isinstance(kw.value, ast.Constant):
                        return bool(kw.value.value)
                return False
    return None


class TestFrozenDataclassConvention:
    """All domain dataclasses must be frozen."""

    def test_domain_models_are_frozen(self):
        source = (SRC_ROOT / "domain" / "models.py").read_text()
        tree = ast.parse(source)

        violations = [
            node.name
            for node in ast.walk(tree)
            if isinstance(node, ast.ClassDef) and _frozen_flag(node) is False
        ]

        assert not violations, f"Domain dataclasses must be frozen: {violations}"

    def test_settings_are_frozen(self):
        source = (SRC_ROOT / "infrastructure" / "config.py").read_text()
        tree = ast.parse(source)

        violations = [
            node.name
            for node in ast.walk(tree)
            if isinstance(node, ast.ClassDef) and _frozen_flag(node) is False
        ]

        assert not violations, f"Settings dataclasses must be frozen: {violations}"


class TestImmutableCollections:
    """Frozen domain model fields should use tuple, not list."""

    def test_domain_models_use_tuples_not_lists(self):
        source = (SRC_ROOT / "domain" / "models.py").read_text()
        tree = ast.parse(source)

        violations = []
        for node in ast.walk(tree):
            if not isinstance(node, ast.ClassDef) or not _frozen_flag(node):
                continue
            for item in node.body:
                if isinstance(item, ast.AnnAssign):
                    target_name = getattr(item.target, "id", "?")
                    annotation = ast.get_source_segment(source, item.annotation)
                    if annotation and "list[" in annotation.lower():
                        violations.append(f"{node.name}.{target_name}")

        assert not violations, (
            "Frozen dataclass fields should use tuple, not list:\n"
            + "\n".join(f"  - {v}" for v in violations)
        )


class TestNoSilentExceptionSwallowing:
    """No 'except: pass' or 'except Exception: pass' in src/."""

    def test_no_bare_except_pass(self):
        violations = []

        for py_file in SRC_ROOT.rglob("*.py"):
            source = py_file.read_text()
            tree = ast.parse(source)

            for node in ast.walk(tree):
                if not isinstance(node, ast.ExceptHandler):
                    continue
                if node.type is None:
                    violations.append(f"{py_file.name}:{node.lineno}: bare except")
                    continue
                if len(node.body) == 1:
                    stmt = node.body[0]
                    is_pass = isinstance(stmt, ast.Pass)
                    is_ellipsis = (
                        isinstance(stmt, ast.Expr)
                        and isinstance(stmt.value, ast.Constant)
                        and stmt.value.value is ...
                    )
                    if is_pass or is_ellipsis:
                        violations.append(f"{py_file.name}:{node.lineno}: pass")

        assert not violations, "Silent exception swallowing found:\n" + "\n".join(
            f"  - {v}" for v in violations
        )


class TestInterfaceConventions:
    """Interface naming and contract conventions."""

    def test_all_ports_end_with_interface(self):
        """All ABCs in domain/interfaces.py must end with 'Interface'."""
        from jiraflow.domain import interfaces

        violations = [
            name
            for name, obj in inspect.getmembers(interfaces, inspect.isclass)
            if inspect.isabstract(obj) and not name.endswith("Interface")
        ]

        assert not violations, (
            f"Abstract classes should end with 'Interface': {violations}"
        )

    def test_all_interface_methods_are_abstract(self):
        """Every public method on a port must be abstract."""
        from jiraflow.domain import interfaces

        violations = []
        for name, cls in inspect.getmembers(interfaces, inspect.isclass):
            if not inspect.isabstract(cls) or not name.endswith("Interface"):
                continue
            for method_name, method in inspect.getmembers(
                cls, predicate=inspect.isfunction
            ):
                if method_name.startswith("_"):
                    continue
                if not getattr(method, "__isabstractmethod__", False):
                    violations.append(f"{name}.{method_name}")

        assert not violations, (
            f"Public interface methods must be abstract: {violations}"
        )

    @pytest.mark.parametrize(
        ("interface_path", "implementation_paths"),
        [
            (
                "jiraflow.domain.interfaces:PathCacheInterface",
                [
                    "jiraflow.infrastructure.persistence.filesystem:FilesystemPathCache",
                    "jiraflow.infrastructure.persistence.memory:InMemoryPathCache",
                ],
            ),
            (
                "jiraflow.domain.interfaces:TransitionOracleInterface",
                [
                    "jiraflow.infrastructure.oracle.memory:InMemoryTransitionOracle",
                    "jiraflow.infrastructure.oracle.mock:ScriptedTransitionOracle",
                ],
            ),
            (
                "jiraflow.domain.interfaces:StateResolverInterface",
                [
                    "jiraflow.domain.resolution:MetadataStateResolver",
                    "jiraflow.domain.resolution:NameHeuristicStateResolver",
                ],
            ),
            (
                "jiraflow.domain.interfaces:ConfirmationInterface",
                [
                    "jiraflow.infrastructure.interactive.console:ConsoleConfirmation",
                ],
            ),
        ],
    )
    def test_implementations_satisfy_interfaces(
        self, interface_path: str, implementation_paths: list[str]
    ):
        """All implementations must define every abstract method."""
        import importlib

        def load(path: str) -> type:
            module_name, class_name = path.split(":")
            return getattr(importlib.import_module(module_name), class_name)

        interface = load(interface_path)
        abstract_methods = {
            name
            for name, method in inspect.getmembers(
                interface, predicate=inspect.isfunction
            )
            if getattr(method, "__isabstractmethod__", False)
        }

        for impl_cls in map(load, implementation_paths):
            assert issubclass(impl_cls, interface)
            assert not inspect.isabstract(impl_cls)
            impl_methods = {
                name
                for name, method in inspect.getmembers(
                    impl_cls, predicate=inspect.isfunction
                )
                if not getattr(method, "__isabstractmethod__", False)
            }
            missing = abstract_methods - impl_methods
            assert not missing, f"{impl_cls.__name__} is missing methods: {missing}"
