"""Domain models for the home lab inventory."""
