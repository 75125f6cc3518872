"""Domain layer for codegen-naming.

Pure string algorithms used by code generators: relative path computation
(`paths`), identifier sanitization (`text`) and the platform policy value
objects they are parameterized with (`value_objects`). Nothing in this layer
performs I/O.
"""
