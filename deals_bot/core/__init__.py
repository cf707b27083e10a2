"""Application wiring: dependency-injection container."""
