"""Services module for FocusPro CLI - collaborators around the focus engine."""
