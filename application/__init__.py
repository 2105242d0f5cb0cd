"""
Application Layer for workout plans.

This package contains:
- ports/: Abstract repository interfaces (what the domain needs)
- services/: Business rule checks applied before writes
- use_cases/: Entry points for plan operations
- exceptions: Errors surfaced to callers
"""
