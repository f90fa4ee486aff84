"""Infrastructure — database sessions, logging setup, bearer authentication."""
