"""Shared fixtures for architecture tests."""

import os

import pytest
from pytestarch import (
    EvaluableArchitecture,
    LayeredArchitecture,
    get_evaluable_architecture,
)


@pytest.fixture(scope="session")
def evaluable() -> EvaluableArchitecture:
    """Build evaluable architecture from src/jiraflow."""
    src_dir = os.path.abspath(
        os.path.join(os.path.dirname(__file__), "..", "..", "src")
    )
    project_path = os.path.join(src_dir, "jiraflow")
    return get_evaluable_architecture(src_dir, project_path)


@pytest.fixture(scope="session")
def layers() -> LayeredArchitecture:
    """Ports-and-adapters layers plus the persisted-document schemas.

    PyTestArch resolves module names relative to the source root,
    so modules appear as 'src.jiraflow.domain', etc.
    """
    return (
        LayeredArchitecture()
        .layer("domain")
        .containing_modules(["src.jiraflow.domain"])
        .layer("application")
        .containing_modules(["src.jiraflow.application"])
        .layer("infrastructure")
        .containing_modules(["src.jiraflow.infrastructure"])
        .layer("schemas")
        .containing_modules(["src.jiraflow.schemas"])
    )
