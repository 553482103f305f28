"""
Core utilities shared across the mock API.

This package hosts configuration (env vars, data file paths, feature flags)
and logging setup. Routers and services depend on these primitives instead of
reading os.environ themselves.
"""
