"""speechcards: outline text to speech practice cards."""

__version__ = "0.1.0"
