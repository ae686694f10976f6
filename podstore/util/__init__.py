"""Path, stream and serialization helpers shared by accessors."""
