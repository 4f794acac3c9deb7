"""
Core domain models, contracts, and errors.

This module contains the foundational building blocks that are independent
of the output harness (file paths, encodings, CLI).
"""
