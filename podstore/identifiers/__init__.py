from podstore.identifiers.single_root import SingleRootIdentifierStrategy

__all__ = ["SingleRootIdentifierStrategy"]
