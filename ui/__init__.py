"""Web views over the persisted clinic schedule."""
