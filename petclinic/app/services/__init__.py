"""
Service layer.

The repository encapsulates every SQL statement the application runs;
the validator and the formatter are the two pieces of form‑binding
logic that do not belong to a single endpoint.
"""
