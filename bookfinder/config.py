from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    openlibrary_base_url: str = "https://openlibrary.org"
    covers_base_url: str = "https://covers.openlibrary.org/b/id"
    placeholder_cover_url: str = "https://via.placeholder.com/150x200?text=No+Cover"
    user_agent: str = "Book Finder (https://openlibrary.org/developers/api)"

    # Open Library caps a page of search.json at 100 docs; we only ever ask
    # for the first 30 and paginate them locally.
    result_limit: int = 30
    page_size: int = 10

    request_timeout: float = 10.0


settings = Settings()
