"""Infrastructure layer: concrete adapters for the domain protocols."""
