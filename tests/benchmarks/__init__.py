"""Benchmarks for grouping_by

Benchmarks are executed as plain tests by default when pytest-benchmark is
installed. Use --benchmark-only in order to run just the benchmarks, e.g.::

    pytest tests/benchmarks --benchmark-only
"""
