"""Configuration, records, errors and the analysis driver."""
