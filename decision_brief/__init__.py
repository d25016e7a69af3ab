"""decision-brief: parse generated market-intelligence reports into decision records."""

__version__ = "0.1.0"
