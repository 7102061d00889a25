"""Form validation and orchestration of a full calculation."""
