"""Property-based tests for fieldkit fields and composite editing state.

Hypothesis generates field configurations and raw inputs to check that
imports, schemas and reactive state agree with each other across a much
wider range of values than the example-based unit tests cover.
"""
