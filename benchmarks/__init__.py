"""Performance benchmarks for nrsolve.

These microbenchmarks time a single Newton-Raphson step, whose cost is
dominated by the dense linear solve, for NumPy and torch containers.
"""
