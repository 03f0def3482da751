from os import getenv

class Settings:
    DATABASE_URL = getenv("DATABASE_URL", "postgresql+psycopg://notionlite:notionlite@db:5432/notionlite")
    POSITION_STEP = int(getenv("POSITION_STEP", "1000"))  # écart entre deux blocks consécutifs
    REINDEX_OFFSET = int(getenv("REINDEX_OFFSET", "1000000"))  # décalage temporaire pendant un reindex
    HOME_SLUG = getenv("HOME_SLUG", "home")
    DEFAULT_PAGE_TITLE = getenv("DEFAULT_PAGE_TITLE", "Untitled")
    LOG_LEVEL = getenv("LOG_LEVEL", "INFO")
    HOST = getenv("HOST", "0.0.0.0")
    PORT = int(getenv("PORT", "8000"))

settings = Settings()
