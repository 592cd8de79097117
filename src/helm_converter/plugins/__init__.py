"""Notation plugin protocol, built-ins and registry."""
