"""Interfaces - entry points into the pipeline."""
