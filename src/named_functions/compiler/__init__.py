"""
Attribute entry point and text-level driver.
"""

from .driver import (
    named_functions, named_impl, compile_error_tokens,
    MacroDriver, ExpansionResult,
)
