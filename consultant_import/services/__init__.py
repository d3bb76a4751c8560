"""Import services: entity resolution, row validation, orchestration and reporting."""
