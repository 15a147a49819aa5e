from ensgraph.db.repositories.relationships import RelationshipRepository

__all__ = ['RelationshipRepository']
