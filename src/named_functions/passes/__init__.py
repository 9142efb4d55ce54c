"""
Token tree passes.
"""

from .name_injection import NameInjectionPass, rewrite, injected_declaration

__all__ = ["NameInjectionPass", "rewrite", "injected_declaration"]
