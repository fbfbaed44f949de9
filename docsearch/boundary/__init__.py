"""
Boundary layer: adapters for PostgreSQL/pgvector and the vector store interface.
"""
