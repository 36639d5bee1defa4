from collab.store.collaboration_store import CollaborationStore

__all__ = ["CollaborationStore"]
