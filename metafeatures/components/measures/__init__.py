"""Measure computations, one module per group.

Each module exposes ``prepare(dataset, options, rngm)``, which derives the
group's working data once per call, plus the measure functions themselves.
Names and arities are attached in :mod:`metafeatures.registries.builtins`.
"""
