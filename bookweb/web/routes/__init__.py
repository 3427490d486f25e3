"""Route modules of the web application."""
