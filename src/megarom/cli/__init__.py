"""
Megarom Command-Line Interface
==============================

This package provides the ``megarom`` command-line tool, implemented as
a Click application.
"""

__all__ = ["megarom"]
