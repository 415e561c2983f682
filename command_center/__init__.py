"""MDO Command Center: OODA loop coordination and multi-domain agent routing."""

__version__ = "2.0.0"
