"""Use cases: orchestrate repositories and the broadcaster."""
