"""SuperAgents - context-aware AI assistant configuration generator."""

__version__ = "1.3.0"
