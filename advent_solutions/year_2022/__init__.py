"""Solutions for the 2022 calendar."""
