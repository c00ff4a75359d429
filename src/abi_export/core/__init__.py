"""Configuration and export-target resolution."""
