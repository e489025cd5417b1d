"""Domain vocabulary for the console's four resource collections."""
