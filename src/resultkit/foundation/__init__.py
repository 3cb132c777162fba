"""Foundation: error taxonomy, trap primitives and configuration."""
