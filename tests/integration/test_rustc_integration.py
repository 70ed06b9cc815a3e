"""
Integration tests against a real rustc.

Run with: pytest --integration
"""

import shutil

import pytest

from rustcfg.cfg.query import cfg_of
from rustcfg.core.exceptions import CfgError, RustcError
from rustcfg.core.settings import RustcSettings
from rustcfg.toolchain.invoker import RustcInvoker

pytestmark = [
    pytest.mark.integration,
    pytest.mark.skipif(shutil.which("rustc") is None, reason="rustc not installed"),
]


@pytest.fixture
def invoker():
    return RustcInvoker(RustcSettings.from_env())


def test_linux_target(invoker):
    cfg = cfg_of("x86_64-unknown-linux-gnu", invoker=invoker)

    assert cfg.target_arch == "x86_64"
    assert cfg.target_family == "unix"
    assert cfg.target_os == "linux"
    assert cfg.target_pointer_width == "64"


def test_unknown_target(invoker):
    with pytest.raises(RustcError) as exc_info:
        cfg_of("not-a-real-target", invoker=invoker)

    assert exc_info.value.stderr


def test_every_listed_target_parses(invoker):
    failures = {}
    for target in invoker.print_target_list():
        try:
            cfg_of(target, invoker=invoker)
        except CfgError as e:
            failures[target] = str(e)

    assert failures == {}
