from .api import DraftStore, make_store

__all__ = ["DraftStore", "make_store"]
