"""taskhub: task tracking API with a real-time change notification channel."""

__version__ = "1.0.0"
