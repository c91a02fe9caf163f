from pydantic import BaseModel, Field

from .selectors import UNTITLED


class Article(BaseModel):
    title: str = Field(UNTITLED, min_length=1, description="Article headline, never empty.")
    author: str = Field("", description="Byline, empty when none was found.")
    date: str = Field("", description="Publish date as 'January 5, 2024', or empty.")
    content: str = Field("", description="Cleaned body as an HTML fragment.")
    url: str = Field("", description="Source URL the document was fetched from.")
    extractor: str = Field("generic", description="Extractor that produced the content.")
