"""Infrastructure modules: database models and session management."""
