"""API routes for the Registry."""
