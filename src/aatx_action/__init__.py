"""GitHub Action that validates analytics events against an AATX tracking plan."""

__version__ = "0.1.0"
