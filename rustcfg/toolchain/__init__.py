"""
Toolchain invocation for rustcfg.
"""

from rustcfg.toolchain.invoker import (
    RustcInvoker,
    RustcOutput,
    RustcVersion,
    decode_output,
)

__all__ = [
    "RustcInvoker",
    "RustcOutput",
    "RustcVersion",
    "decode_output",
]
