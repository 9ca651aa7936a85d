"""Client library for the amoCRM REST API: OAuth2 tokens, an authorised client and access rights."""

__version__ = "0.1.0"