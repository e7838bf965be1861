"""Django config package for the ringside project."""
