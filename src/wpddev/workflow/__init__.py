"""Setup workflow: a pydantic-graph state machine."""
