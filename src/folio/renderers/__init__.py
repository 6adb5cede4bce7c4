"""Rendering helpers shared by the Jinja2 templates."""
