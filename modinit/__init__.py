"""Dependency-ordered initialisation and teardown of application modules, with a small demo."""

__version__ = "0.0.1"
__all__ = ["registry", "demo"]