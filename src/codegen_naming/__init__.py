"""codegen-naming

Deterministic path and identifier helpers for code-generation tooling.
It computes relative paths between locations without touching the filesystem
and rewrites arbitrary strings into valid namespaces and type names.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
