"""
Card performance scoring.

Modules
-------
aggregator : performance_weight() + compute_scores() — pure functions, no I/O.
"""
