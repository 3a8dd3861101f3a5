"""In-memory infrastructure backing the habit stores."""
