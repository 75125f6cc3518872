"""Entrypoints (inbound adapters) for codegen-naming.

Expose the library to the outside world: currently a command-line interface.
Parse and validate inputs, call domain and service-layer functions, and
present results.
"""
