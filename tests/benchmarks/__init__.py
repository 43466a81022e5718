"""Benchmarks for graphql_walker

The benchmarks also run as plain tests. Use --benchmark-skip to leave them out, or
--benchmark-only to run nothing else.
"""
