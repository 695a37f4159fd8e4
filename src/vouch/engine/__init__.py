"""Engine layer: environment threading, accumulation scopes and combinators.

The engine may import from domain, config.models and errors.
It must never import from constraints, output or cli.
"""
