"""forma: AI-architected workout blueprints."""

__version__ = "0.1.0"
