"""Static configuration for the admin console."""
