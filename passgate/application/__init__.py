"""Application layer: orchestration of validation and transformation steps."""
