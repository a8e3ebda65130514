"""FastAPI application for UserHub."""
