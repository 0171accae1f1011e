from .graph_store import InMemoryGraphStore

__all__ = ['InMemoryGraphStore']
