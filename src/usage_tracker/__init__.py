"""usage-tracker — record usages of things and estimate future needs."""

__version__ = "0.3.0"
