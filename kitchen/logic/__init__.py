"""Derived views over the kitchen store.

Subpackages:
- inventory: expiry states, category grouping and filtering
- shopping: shopping list progress
- planner: week navigation and meal slot assignment
"""
__all__ = ["inventory", "shopping", "planner"]
