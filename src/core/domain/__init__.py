"""Domain models and errors.

Why:
- Plain, strict data structures (Pydantic v2) and the error hierarchy.
- The domain knows nothing about HTTP, subprocesses or the CLI.
"""
