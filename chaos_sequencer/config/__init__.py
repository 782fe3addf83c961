"""Run configuration schemas, YAML loading and environment settings."""
