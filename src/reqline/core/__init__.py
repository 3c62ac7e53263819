"""Core services shared across reqline."""
