"""Reporters: terminal, JSON, SARIF."""
