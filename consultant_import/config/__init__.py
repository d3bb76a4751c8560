"""YAML configuration and reference snapshot loading."""
