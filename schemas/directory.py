from typing import Generic, List, Optional, TypeVar
from pydantic import BaseModel, Field

T = TypeVar('T')


class DirectoryPage(BaseModel, Generic[T]):
    """A list as shown on a directory page.

    ``loaded`` separates "still loading" from a loaded page with nothing to
    show; ``message`` carries the optional one-line diagnostic of a failed read.
    """
    items: List[T] = Field(default_factory=list)
    loaded: bool = True
    message: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        return self.loaded and not self.items


class UploadOutcome(BaseModel):
    filename: str
    url: Optional[str] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.url is not None


class UploadBatchResult(BaseModel):
    outcomes: List[UploadOutcome] = Field(default_factory=list)
    skipped: int = 0

    @property
    def urls(self) -> List[str]:
        return [o.url for o in self.outcomes if o.url]
