"""
Generic utility functions shared across modules.

Includes string and number helpers, timer schedulers for deterministic
testing, and logging setup.
"""
