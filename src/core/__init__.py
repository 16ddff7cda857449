"""
Core numeric primitives and invariants.

This module contains the fixed-point building blocks that are independent
of any caller-level business logic (lending, pricing, etc.).
"""
