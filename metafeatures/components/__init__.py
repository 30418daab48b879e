"""Computation components: summaries, splitters, evaluation, trees, measures."""
