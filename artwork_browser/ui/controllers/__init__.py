"""UI controllers."""
