"""
Core RAG logic: document processing, retrieval, context assembly and generation.
"""
