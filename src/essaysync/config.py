from __future__ import annotations

# panel sides
ORIGINAL: str = "original"
IMPROVED: str = "improved"

# bands the scoring backend returns improved versions for
BANDS: tuple[int, ...] = (7, 8, 9)
DEFAULT_BAND: int = 9

# colour palettes cycle by sentence / paragraph position
SENTENCE_PALETTE_SIZE: int = 8
PARAGRAPH_PALETTE_SIZE: int = 6

# splitter memo size (per distinct input text)
SPLIT_CACHE_SIZE: int = 512

# /* ~~~ essay drafts ~~~ */
DRAFT_KEY: str = "ace-uplift-essay-draft"
DRAFT_MAX_AGE_SECONDS: int = 24 * 60 * 60
STORE_DSN: str = "memory://"     # "memory://" or "sqlite:///path/to/drafts.sqlite"

# web UI
HOST: str = "127.0.0.1"
PORT: int = 8000
