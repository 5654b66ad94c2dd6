"""Small programming demos: stacks, language detection, a timer counter, a bank account and concurrent tasks."""

__version__ = "0.1.0"