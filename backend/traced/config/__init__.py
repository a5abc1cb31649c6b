"""Static configuration for the Traced backend."""
