"""
Services - Cache Service

TTL-based caching with separate directory and content tiers.
"""

from typing import Any, Optional
from functools import lru_cache
from cachetools import TTLCache
import threading

from docmost_mcp.config import get_settings

DIRECTORY_PREFIXES = ("workspace:", "spaces:", "groups:")


class CacheService:
    """TTL-based cache with directory and content tiers."""
    
    def __init__(self, settings=None):
        self.settings = settings or get_settings()
        self._lock = threading.Lock()
        
        # Directory cache (workspace, spaces, groups)
        self._directory_cache = TTLCache(
            maxsize=100,
            ttl=self.settings.cache.ttl_directory,
        )
        
        # Content cache (history entries never change once written)
        self._content_cache = TTLCache(
            maxsize=500,
            ttl=self.settings.cache.ttl_content,
        )
    
    def get(self, key: str) -> Optional[Any]:
        """
        Get value from cache.
        
        Args:
            key: Cache key (prefix determines tier)
            
        Returns:
            Cached value or None
        """
        if not self.settings.cache.enabled:
            return None
        
        with self._lock:
            cache = self._get_cache_tier(key)
            return cache.get(key)
    
    def set(self, key: str, value: Any) -> None:
        """
        Set value in cache.
        
        Args:
            key: Cache key (prefix determines tier)
            value: Value to cache
        """
        if not self.settings.cache.enabled:
            return
        
        with self._lock:
            cache = self._get_cache_tier(key)
            cache[key] = value
    
    def delete(self, key: str) -> None:
        """Delete a key from cache."""
        with self._lock:
            cache = self._get_cache_tier(key)
            if key in cache:
                del cache[key]
    
    def clear_all(self) -> None:
        """Clear all caches."""
        with self._lock:
            self._directory_cache.clear()
            self._content_cache.clear()
    
    def _get_cache_tier(self, key: str) -> TTLCache:
        """Determine cache tier based on key prefix."""
        if key.startswith(DIRECTORY_PREFIXES):
            return self._directory_cache
        else:
            return self._content_cache
    
    def get_stats(self) -> dict:
        """Get cache statistics."""
        return {
            "directory_cache": {
                "size": len(self._directory_cache),
                "maxsize": self._directory_cache.maxsize,
                "ttl": self._directory_cache.ttl,
            },
            "content_cache": {
                "size": len(self._content_cache),
                "maxsize": self._content_cache.maxsize,
                "ttl": self._content_cache.ttl,
            },
            "enabled": self.settings.cache.enabled,
        }


@lru_cache(maxsize=1)
def shared_cache() -> CacheService:
    """Process-wide cache shared by the services behind the tools."""
    return CacheService()
