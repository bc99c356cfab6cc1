"""
Shared building blocks for the helper functions.

Provides the value-kind discriminator, the record/sequence predicates,
static type aliases, and the exception hierarchy.
"""
