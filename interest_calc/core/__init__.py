"""Pure calculation logic: projection, yearly aggregation, summary, formatting."""
