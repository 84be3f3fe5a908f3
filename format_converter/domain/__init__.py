"""Format ids, catalog, errors and the converter interface."""
