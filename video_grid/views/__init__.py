"""Views module for template rendering."""
