"""Bridge between a WordPress backend and a headless Next.js frontend."""

__version__ = "1.0.6"
