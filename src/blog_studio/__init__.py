"""Blog Studio: AI-assisted blog editor backend with document version history."""
