"""Console and file adapters over finished runs."""
