"""Shared test configuration."""

import hypothesis
import jax

# jax is the reference implementation in these tests; match our float64 storage.
jax.config.update("jax_enable_x64", True)

# Use hypothesis profile for CI
hypothesis.settings.register_profile("ci", max_examples=10, deadline=None)
