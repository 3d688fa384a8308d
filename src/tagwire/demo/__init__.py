"""A small application wiring a database handle into a consumer record."""
