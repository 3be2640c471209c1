from pathlib import Path

DEFAULT_LANGUAGE = "en"
DEFAULT_SUPPORTED_LANGUAGES = ("en",)

# Flags shown next to language codes in the picker; anything else gets a globe.
LANGUAGE_FLAGS = {"en": "🇺🇸", "fr": "🇫🇷", "de": "🇩🇪", "es": "🇪🇸"}
FALLBACK_FLAG = "🌐"

TRANSLATIONS_DIR = Path(__file__).resolve().parents[1] / "translations"
DEMO_LANGUAGES = ["en", "fr", "de", "es"]

_AUTHOR = {"name": "Mahmoud Harmouch", "avatar_url": "images/pic.png"}
_DATA_SCIENCE_TAG = {"name": "Data Science", "url": "https://wiseai.dev/blog/tags/data-science"}

# Titles, dates and tag names are translation keys.
TRENDING_POSTS = [
    {
        "id": 1,
        "title": "Rust: The Next Big Thing in Data Science",
        "url": "https://towardsdatascience.com/rust-the-next-big-thing-in-data-science-319a03305883",
        "date": "24 Apr, 2023",
        "thumb": "https://miro.medium.com/v2/resize:fit:720/format:webp/1*2jSP2n1KukVJYKVg2u4RuA.png",
        "tags": [_DATA_SCIENCE_TAG],
        "author": _AUTHOR,
    },
    {
        "id": 2,
        "title": "The Ultimate Ndarray Handbook: Mastering the Art of Scientific Computing with Rust",
        "url": "https://towardsdatascience.com/the-ultimate-ndarray-handbook-mastering-the-art-of-scientific-computing-with-rust-ef5ab767212a",
        "date": "02 May, 2023",
        "thumb": "https://miro.medium.com/v2/resize:fit:720/format:webp/1*bgmO2hUgZXpCHPC1XaBy3w.png",
        "tags": [_DATA_SCIENCE_TAG],
        "author": _AUTHOR,
    },
    {
        "id": 3,
        "title": "Rust Polars: Unlocking High-Performance Data Analysis — Part 1",
        "url": "https://towardsdatascience.com/rust-polars-unlocking-high-performance-data-analysis-part-1-ce42af370ece",
        "date": "11 May, 2023",
        "thumb": "https://miro.medium.com/v2/resize:fit:720/0*Le8YYCDuEhc4A7tN",
        "tags": [_DATA_SCIENCE_TAG],
        "author": _AUTHOR,
    },
]
