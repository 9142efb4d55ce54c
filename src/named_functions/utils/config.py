"""
Configuration constants used throughout named_functions.

There is no invocation-time configuration: the attribute rejects arguments.
Everything tunable lives here as a fixed constant.
"""

import os
import tempfile

# Function header detection
FUNCTION_KEYWORD = "fn"

# Injected declaration: macro_rules! function_name { () => ("NAME") }
DECLARATION_KEYWORD = "macro_rules"
FUNCTION_NAME_MACRO = "function_name"

# Diagnostic construct: ::core::compile_error! { "MESSAGE" }
DIAGNOSTIC_CRATE = "core"
DIAGNOSTIC_MACRO = "compile_error"
UNEXPECTED_ARGUMENTS_MESSAGE = "unexpected attribute arguments"

# Token-tree reader
DEFAULT_SOURCE_FILE = "<tokens>"
DEFAULT_PARSER_CACHE_FILE = os.path.join(tempfile.gettempdir(), "named_functions_tokens.cache")
