"""Movie extraction service backed by OpenAI."""

import hashlib
import logging
from textwrap import dedent
from typing import Any, List, Optional

import openai
from diskcache import Cache
from tenacity import retry, retry_if_exception_type, stop_after_attempt, wait_exponential

from ..core.config import settings
from ..core.constants import PromptConstants, CacheConstants
from ..core.errors import ExtractionFailure
from ..core.models import MovieRecord
from ..core.schema import parse_extraction_payload, validate_records

logger = logging.getLogger(__name__)

EXTRACTION_PROMPT_VERSION = PromptConstants.EXTRACTION_PROMPT_VERSION

EXTRACTION_SYSTEM_PROMPT = dedent("""
You extract movies from movie club chat logs. Return ONLY a JSON array (no prose, no code fences).
Output strict JSON only. No comments, no trailing commas.
""").strip()

EXTRACTION_PROMPT = dedent("""
Analyze the following chat log from a movie club.
Extract every movie mentioned that is being recommended, discussed, or reviewed.
List each movie once, even if it comes up several times.

For each movie, infer or extract the following details:
1. title (Correct full title)
2. year (Release year, estimate if unknown but try to be accurate)
3. director (if known or inferable)
4. genres (List of genres, e.g., Sci-Fi, Drama, Horror)
5. language (Primary language of the film)
6. country (Country of origin)
7. summary (A brief 1-sentence synopsis)
8. recommender (The name of the person who recommended it, if apparent in the text structure like "User: I liked X", otherwise null)
9. sentiment (The general vibe of the recommendation: positive, neutral, negative, mixed)
10. mentionCount (How many times this movie was discussed or mentioned, at least 1)

JSON schema (array of objects):
[{"title": str, "year": int, "director": str, "genres": [str], "language": str,
  "country": str, "summary": str, "recommender": str|null,
  "sentiment": "positive"|"neutral"|"negative"|"mixed", "mentionCount": int}]
Required keys: title, genres, language, country, summary.

Chat Log content:
{chat_text}
""").strip()

# Failures worth another attempt; anything else fails the run at once
TRANSIENT_ERRORS = (
    openai.APIConnectionError,
    openai.APITimeoutError,
    openai.RateLimitError,
    openai.InternalServerError,
)


def truncate_chat(chat_text: str, limit: Optional[int] = None) -> str:
    """Trim the chat log to the number of characters sent to the model."""
    limit = settings.max_chat_chars if limit is None else limit
    return chat_text[:limit]


class ExtractionServiceFactory:
    """Factory for creating extraction services."""
    
    @staticmethod
    def create():
        """Create appropriate extraction service."""
        if settings.effective_openai_key:
            return OpenAIExtractionService()
        else:
            return FallbackExtractionService()


class OpenAIExtractionService:
    """OpenAI-based movie extraction."""
    
    def __init__(self, client: Any = None, cache: Any = None, model: Optional[str] = None):
        self.client = client or openai.OpenAI(api_key=settings.effective_openai_key)
        self.model = model or settings.openai_model
        self.cache = cache if cache is not None else Cache(settings.cache_dir)
        logger.info(f"OpenAI extraction service initialized with model {self.model}")
    
    def _cache_key(self, chat_text: str) -> str:
        return hashlib.md5(f"{self.model}|{EXTRACTION_PROMPT_VERSION}|{chat_text}".encode()).hexdigest()
    
    @retry(
        retry=retry_if_exception_type(TRANSIENT_ERRORS),
        stop=stop_after_attempt(settings.max_retries),
        wait=wait_exponential(multiplier=settings.retry_delay, exp_base=settings.retry_backoff, max=settings.retry_max_wait),
        reraise=True,
    )
    def _request(self, chat_text: str) -> str:
        response = self.client.chat.completions.create(
            model=self.model,
            messages=[
                {"role": "system", "content": EXTRACTION_SYSTEM_PROMPT},
                {"role": "user", "content": EXTRACTION_PROMPT.replace("{chat_text}", chat_text)},
            ],
            max_tokens=PromptConstants.EXTRACTION_MAX_TOKENS,
            temperature=PromptConstants.EXTRACTION_TEMPERATURE,
            timeout=settings.request_timeout,
        )
        return (response.choices[0].message.content or "").strip()
    
    def complete(self, chat_text: str) -> str:
        """Return the raw model output for a chat log."""
        try:
            return self._request(chat_text)
        except Exception as e:
            logger.error(f"Extraction request failed: {e}")
            raise ExtractionFailure(f"Extraction request failed: {e}") from e
    
    def extract(self, chat_text: str) -> List[MovieRecord]:
        """Extract validated movie records from a chat log.
        
        Only validated results are cached, so a failed run is retried
        against the model next time.
        """
        chat_text = truncate_chat(chat_text)
        cache_key = self._cache_key(chat_text)
        cached_movies = self.cache.get(cache_key)
        if cached_movies is not None:
            logger.debug(f"Cache hit for extraction request: {cache_key[:CacheConstants.CACHE_KEY_LENGTH]}...")
            return validate_records(cached_movies)
        
        movies = parse_extraction_payload(self.complete(chat_text))
        
        self.cache.set(cache_key, [m.to_dict() for m in movies], expire=3600*settings.cache_ttl_hours)
        logger.debug(f"Cached extraction result: {cache_key[:CacheConstants.CACHE_KEY_LENGTH]}...")
        logger.info(f"Extracted {len(movies)} movies")
        return movies


class FallbackExtractionService:
    """Used when no API key is configured; every run fails."""
    
    def __init__(self):
        logger.info("Using fallback extraction service")
    
    def extract(self, chat_text: str) -> List[MovieRecord]:
        logger.warning("Fallback extraction service called - no actual LLM available")
        raise ExtractionFailure("No OpenAI API key configured")


class StaticExtractionService:
    """Returns a fixed payload, for offline runs and tests."""
    
    def __init__(self, payload: Any):
        self.payload = payload
    
    def extract(self, chat_text: str) -> List[MovieRecord]:
        return validate_records(self.payload)
