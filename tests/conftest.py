"""
Pytest configuration and shared fixtures for rustcfg tests.
"""

from unittest.mock import Mock

import pytest


def pytest_addoption(parser):
    """Add custom command line options."""
    parser.addoption(
        "--integration",
        action="store_true",
        default=False,
        help="run integration tests that require a real rustc",
    )


def pytest_collection_modifyitems(config, items):
    """Skip integration tests unless --integration flag is provided."""
    if not config.getoption("--integration"):
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


LINUX_CFG_OUTPUT = """\
debug_assertions
panic="unwind"
target_abi=""
target_arch="x86_64"
target_endian="little"
target_env="gnu"
target_family="unix"
target_feature="fxsr"
target_feature="sse"
target_feature="sse2"
target_has_atomic="16"
target_has_atomic="32"
target_has_atomic="64"
target_has_atomic="8"
target_has_atomic="ptr"
target_os="linux"
target_pointer_width="64"
target_vendor="unknown"
unix
"""

BARE_METAL_CFG_OUTPUT = """\
debug_assertions
panic="abort"
target_abi="eabi"
target_arch="arm"
target_endian="little"
target_env=""
target_has_atomic="16"
target_has_atomic="32"
target_has_atomic="8"
target_has_atomic="ptr"
target_os="none"
target_pointer_width="32"
"""


@pytest.fixture
def linux_cfg_output() -> str:
    """cfg output for x86_64-unknown-linux-gnu."""
    return LINUX_CFG_OUTPUT


@pytest.fixture
def bare_metal_cfg_output() -> str:
    """cfg output for thumbv7em-none-eabi (no family, no vendor)."""
    return BARE_METAL_CFG_OUTPUT


@pytest.fixture
def completed_process():
    """Factory for fake subprocess.run results with byte streams."""

    def make(returncode: int = 0, stdout: bytes = b"", stderr: bytes = b""):
        return Mock(returncode=returncode, stdout=stdout, stderr=stderr)

    return make


@pytest.fixture
def no_rustc_env(monkeypatch):
    """Remove RUSTC from the environment."""
    monkeypatch.delenv("RUSTC", raising=False)
