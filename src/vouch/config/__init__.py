"""Configuration: per-call models, CLI settings, discovery and logging."""
