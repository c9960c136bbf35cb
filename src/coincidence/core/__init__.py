"""
Core domain models.

This module contains the foundational building blocks that are independent
of any caller layer (parsers, CLI, storage).
"""
