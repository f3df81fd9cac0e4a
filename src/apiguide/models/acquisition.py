"""Documentation acquisition data models"""

from enum import Enum

from pydantic import BaseModel, Field, SecretStr


class ContentSource(str, Enum):
    """Which acquisition strategy produced the content"""

    DIRECT = "direct"
    MANAGED_EXTRACTOR = "managed-extractor"
    BASIC_FETCH = "basic-fetch"


class AcquisitionRequest(BaseModel):
    """A URL to fetch, or documentation text pasted by the user"""

    url: str | None = None
    text: str | None = None

    @property
    def direct_text(self) -> str:
        """Pasted text with surrounding whitespace removed ("" if none)"""
        return (self.text or "").strip()


class AcquisitionResult(BaseModel):
    """Bounded documentation text and where it came from"""

    content: str
    source: ContentSource
    title: str | None = None

    def to_payload(self) -> dict[str, str]:
        payload = {"content": self.content, "source": self.source.value}
        if self.title:
            payload["title"] = self.title
        return payload


class Credentials(BaseModel):
    """Per-call keys. Never stored, never copied into results."""

    llm_key: SecretStr | None = Field(default=None)
    extractor_key: SecretStr | None = Field(default=None)

    def get_llm_key(self) -> str | None:
        return self.llm_key.get_secret_value() if self.llm_key else None

    def get_extractor_key(self) -> str | None:
        return self.extractor_key.get_secret_value() if self.extractor_key else None
