"""Model provider adapters: embeddings and chat completions."""
