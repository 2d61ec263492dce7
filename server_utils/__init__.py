"""Host-side server utilities."""
