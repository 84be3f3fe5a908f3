"""Registry, alias index, query service and batch runner."""
