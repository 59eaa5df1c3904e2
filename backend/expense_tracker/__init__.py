"""Expense Tracker Application Package - projects, members, categories and expenses.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
