"""Core building blocks of mambupy."""
