"""Exercism core: curricula, submission lifecycle, and mentoring cohorts.

Modules:
    - curriculum: Exercise values and path → exercise resolution
    - submissions: Attempt state machine, lifecycle states, submission service
    - cohorts: Team-derived peers, managers, and visibility
    - repositories: Async data access and unit of work
    - infrastructure: Database models and session management
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
