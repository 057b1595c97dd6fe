"""Constants and configuration values for CineChat."""

# Dashboard Constants
class DashboardConstants:
    """Constants related to dashboard aggregation and filtering."""
    
    # Ranking sizes
    TOP_GENRES = 6  # genres shown in the distribution chart
    TOP_COUNTRIES = 6  # countries shown in the origin chart
    TOP_RECOMMENDERS = 5  # people shown in the leaderboard
    MOST_DISCUSSED = 3  # highlighted movies
    
    # Filter sentinel
    ALL_GENRES = "All"
    
    # Recommender values that mean "no attribution" (exact match)
    RECOMMENDER_SENTINELS = ("Unknown", "null")
    
    # Mention count assumed when the model omits it
    DEFAULT_MENTION_COUNT = 1

# Prompt Constants
class PromptConstants:
    """Constants for LLM prompts and templates."""
    
    # Prompt Versions (for cache invalidation)
    EXTRACTION_PROMPT_VERSION = "v1.3"
    
    # Response Limits
    EXTRACTION_MAX_TOKENS = 8000  # movie lists can be long
    EXTRACTION_TEMPERATURE = 0.2  # low temperature for consistent extraction

# Cache Constants
class CacheConstants:
    """Constants for caching behavior."""
    
    CACHE_KEY_LENGTH = 8  # length of cache key for logging

# File and Path Constants
class FileConstants:
    """Constants for file operations."""
    
    CHAT_LOG_SUFFIXES = (".txt",)  # accepted chat export formats
    CHAT_LOG_ENCODING = "utf-8"
    LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    EXPORT_VERSION = "1.0.0"
