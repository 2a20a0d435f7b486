"""
Pytest configuration and shared fixtures for crossargs tests.
"""

import pytest
from pathlib import Path

from tests.mocks import (
    IPHONEOS_SDK,
    IPHONESIMULATOR_SDK,
    MACOSX_SDK,
    MockCommandRunner,
    xcrun_outputs,
)
from crossargs.cross.sysroot import SdkResolver


def pytest_addoption(parser):
    """Add custom command line options."""
    parser.addoption(
        "--integration",
        action="store_true",
        default=False,
        help="run integration tests that invoke real Xcode tools",
    )


def pytest_collection_modifyitems(config, items):
    """Skip integration tests unless --integration flag is provided."""
    if config.getoption("--integration"):
        return
    skip_integration = pytest.mark.skip(reason="need --integration option to run")
    for item in items:
        if "integration" in item.keywords:
            item.add_marker(skip_integration)


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "integration: marks tests as integration tests (requires --integration)",
    )


# ============================================================================
# Shared Test Fixtures
# ============================================================================


@pytest.fixture
def xcrun_runner() -> MockCommandRunner:
    """Mock runner answering xcrun for all three SDKs."""
    return MockCommandRunner(
        xcrun_outputs(
            macosx=MACOSX_SDK + "\n",
            iphoneos=IPHONEOS_SDK + "\n",
            iphonesimulator=IPHONESIMULATOR_SDK + "\n",
        )
    )


@pytest.fixture
def sdk_resolver(xcrun_runner) -> SdkResolver:
    """SdkResolver backed by the mock xcrun runner."""
    return SdkResolver(xcrun_runner)


@pytest.fixture
def framework_tree(tmp_path: Path) -> Path:
    """Directory tree with one included and one excluded framework."""
    root = tmp_path / "frameworks"
    (root / "A.framework" / "Headers").mkdir(parents=True)
    (root / "A.framework" / "Headers" / "A.h").write_text("// A\n")
    (root / "excluded" / "B.framework").mkdir(parents=True)
    (root / "README.txt").write_text("not a framework\n")
    return root


@pytest.fixture
def no_target(monkeypatch):
    """Ensure TARGET is not set."""
    monkeypatch.delenv("TARGET", raising=False)


@pytest.fixture
def in_tmp_cwd(tmp_path: Path, monkeypatch) -> Path:
    """Run the test from an empty working directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path
