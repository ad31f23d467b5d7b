"""Build lifecycle, actions and orchestration."""
