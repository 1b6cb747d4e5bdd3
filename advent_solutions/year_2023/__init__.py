"""Solutions for the 2023 calendar."""
