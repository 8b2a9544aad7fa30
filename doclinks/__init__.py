"""Output filenames, fragment IDs and cross-reference links for API documentation."""
