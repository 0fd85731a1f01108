from typing import TypedDict, List, Optional
from pydantic import BaseModel, Field


# Pydantic models for scan state
class DiscoveredUrl(BaseModel):
    url: str
    hostname: str
    # None until the classifier has run
    follow: Optional[bool] = None
    cloud_hosted: bool = False


class CrawlSession(BaseModel):
    root_hostname: str
    discovered_urls: List[DiscoveredUrl] = Field(default_factory=list)
    discovered_ips: List[str] = Field(default_factory=list)


# TypedDicts for results handed back to callers
class ScrapeResult(TypedDict):
    target: str
    root_hostname: str
    depth: int
    discovered_ips: List[str]
    discovered_urls: List[DiscoveredUrl]
    cloud_hostnames: List[str]
    children: List["ScrapeResult"]
    failed: List[str]
