"""Infrastructure layer — pricing and storage collaborators."""
