"""
Core domain models, arbitrary-precision math, and contracts.

This module contains the foundational building blocks that are independent
of the console (input streams, terminals, process exit).
"""
