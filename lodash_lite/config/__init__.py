"""
Configuration loading and validation.

Provides strongly typed settings objects for the timer backend, the random
seed and the log level, loaded from environment variables with upfront
validation.
"""
