"""Configuration schema using Pydantic."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from pydantic_settings import BaseSettings


class Base(BaseModel):
    """Base model that accepts both camelCase and snake_case keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ProviderConfig(Base):
    """LLM provider configuration."""
    api_key: str = ""
    api_base: str | None = None  # e.g. http://localhost:11434 for Ollama
    extra_headers: dict[str, str] | None = None

    @property
    def is_configured(self) -> bool:
        """A provider needs either a key or a custom endpoint."""
        return bool(self.api_key or self.api_base)


class ClassifierConfig(Base):
    """Configuration for the intent classifier."""
    ai_enabled: bool = True  # False: skip the model and always use heuristics
    model: str = "gpt-4o-mini"
    temperature: float = 0.1
    max_tokens: int = 10
    timeout_ms: int | None = None  # None: rely on the provider's own timeout


class LoggingConfig(Base):
    """Logging sinks configuration."""
    level: str = "SUCCESS"  # Console level
    log_file: str | None = None  # Decision log; no file sink when unset
    rotation: str = "10 MB"
    retention: str = "1 week"


class Config(BaseSettings):
    """Root configuration for novaroute."""
    provider: ProviderConfig = Field(default_factory=ProviderConfig)
    classifier: ClassifierConfig = Field(default_factory=ClassifierConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @property
    def ai_available(self) -> bool:
        """Check whether the model attempt should be made at all."""
        return self.classifier.ai_enabled and self.provider.is_configured

    model_config = ConfigDict(
        env_prefix="NOVAROUTE_",
        env_nested_delimiter="__"
    )
