"""Request handlers that orchestrate repositories and choose views."""
