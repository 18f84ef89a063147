"""
Application Layer for the string map.

This package contains:
- ports/: Abstract storage interfaces (what the core needs)
- exceptions: Errors shared by the core and infrastructure layers
"""
