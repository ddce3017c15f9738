"""Infrastructure — database session manager, record stores, and logging setup."""
