"""AI Teaching Platform backend: RAG orchestration and content indexing."""
