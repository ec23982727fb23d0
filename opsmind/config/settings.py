from pydantic_settings import BaseSettings


class Settings(BaseSettings):

    # Chunking
    chunk_size: int = 1000
    chunk_overlap: int = 200
    min_chunk_length: int = 50
    page_size_chars: int = 3000

    # Embeddings
    embedding_backend: str = "openai"  # "openai" | "sentence_transformer"
    embedding_base_url: str = "http://localhost:11434/v1"
    embedding_api_key: str = "ollama"
    embedding_model: str = "nomic-embed-text"
    embedding_max_chunks: int = 50
    embedding_delay_ms: int = 200
    rate_limiter: str = "fixed"  # "fixed" | "token_bucket"
    rate_limiter_burst: int = 1

    # Generation
    llm_base_url: str = "http://localhost:11434/v1"
    llm_api_key: str = "ollama"
    llm_model: str = "qwen2.5:7b"
    llm_max_tokens: int = 1024
    llm_temperature: float = 0.1
    llm_timeout: float = 60.0

    # Ranking
    rag_top_k: int = 3
    rag_vector_threshold: float = 0.01
    rag_keyword_weight: float = 0.1
    rag_keyword_min_length: int = 3

    # Storage
    store_backend: str = "json"  # "memory" | "json"
    store_path: str = "./data/documents.json"

    max_file_bytes: int = 10 * 1024 * 1024

    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_prefix = "OPSMIND_"
        extra = "ignore"


settings = Settings()
