"""Domain models and business rules."""
