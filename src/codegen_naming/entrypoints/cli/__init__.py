"""Command-line interface for codegen-naming."""
