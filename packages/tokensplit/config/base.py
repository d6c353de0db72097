# tokensplit/config/base.py

from pydantic_settings import BaseSettings, SettingsConfigDict


class ChunkingSettings(BaseSettings):
    """
    Chunking defaults loaded from the environment.
    Every field can be set with a TOKENSPLIT_ prefixed variable or a .env file.
    """

    # Token budget
    CHUNK_SIZE: int = 400
    CHUNK_OVERLAP: int = 40

    # Separator handling
    KEEP_SEPARATORS: bool = False
    DOC_TYPE: str | None = None
    SEPARATORS: list[str] | None = None  # JSON list in the environment

    # tiktoken encoding name (r50k_base is the GPT-3 encoding)
    TOKENIZER_ENCODING: str = "r50k_base"

    # Pydantic model config
    model_config = SettingsConfigDict(
        env_prefix="TOKENSPLIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )
