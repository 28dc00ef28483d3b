"""Demo data generators for the Trainer Matching Engine."""
