"""View commands: generate views and preview their names."""
