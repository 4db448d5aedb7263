"""
Compiler Backends.

Renderers from the statement IR to target-language source text.
"""

from linescript.compiler.backends.typescript import TYPE_ALIASES, TypeScriptEmitter

__all__ = ["TYPE_ALIASES", "TypeScriptEmitter"]
