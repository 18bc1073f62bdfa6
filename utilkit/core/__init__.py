"""Core components shared by the utilkit helpers."""
