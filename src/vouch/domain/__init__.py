"""Domain layer: paths, messages, catalogs, outcomes and log entries.

This layer depends only on stdlib, pydantic and :mod:`vouch.errors`.
It must never import from engine, constraints, config, output or cli.
"""
