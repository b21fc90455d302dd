"""registrar: academic enrollment decision engine."""

__version__ = "0.1.0"
