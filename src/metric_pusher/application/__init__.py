"""Application – background scheduling of periodic jobs."""
