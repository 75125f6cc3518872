"""Service layer for codegen-naming.

Use cases that compose the pure domain helpers into the names a code
generator needs for an emitted source artifact.
"""
