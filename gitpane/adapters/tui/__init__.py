"""Terminal UI adapters."""
