"""Infrastructure adapters: database, settings, logging and wiring."""
