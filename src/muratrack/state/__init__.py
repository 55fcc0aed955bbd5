"""State layer.

This package owns the per-session tracker state and the single reducer that
is allowed to advance it.
"""
