"""Google Play Games Services Android setup for game projects."""

__version__ = "0.1.0"
