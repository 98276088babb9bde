"""Click plumbing shared by the tempconv CLI.

The root command lives in :mod:`tempconv.cli`; this package holds its
command base class and the per-invocation application context.
"""
