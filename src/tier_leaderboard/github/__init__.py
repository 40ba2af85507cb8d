from .client import GitHubClient, PageFetchError
from .rate_limit import RateLimitMonitor

__all__ = ["GitHubClient", "PageFetchError", "RateLimitMonitor"]
