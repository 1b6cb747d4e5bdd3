"""Solutions for the 2015 calendar."""
