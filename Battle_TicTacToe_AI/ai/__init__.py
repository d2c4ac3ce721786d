"""Bot heuristics."""
