"""pydantic data models."""
