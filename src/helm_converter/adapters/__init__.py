"""Adapters binding application ports to RDKit."""
