"""
minicc Command-Line Interface
=============================

- **mcc**: the minicc compiler driver

Implemented as a Click application with help and error reporting.
"""

__all__ = ["mcc"]
