"""Infrastructure layer - adapters implementing domain protocols."""
