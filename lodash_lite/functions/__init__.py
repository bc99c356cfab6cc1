"""
Function utilities: timing-control wrappers (debounce, throttle).
"""
