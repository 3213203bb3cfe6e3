"""Application layer: services and dataset ingestion batchers."""
