"""Provider registry mapping each `Provider` to a backend factory.

New providers register a factory with `register_provider`; the summarizer
looks them up here instead of walking a conditional chain.
"""

from __future__ import annotations

from typing import Callable, Dict

from ..config import AppConfig
from ..errors import InvalidProviderError, ProviderNotImplementedError
from ..models import Provider
from .gemini_backend import GeminiBackend
from .interfaces import HttpClient, SummaryProvider

ProviderFactory = Callable[[AppConfig, "HttpClient | None"], SummaryProvider]

_REGISTRY: Dict[Provider, ProviderFactory] = {}


def register_provider(provider: Provider) -> Callable[[ProviderFactory], ProviderFactory]:
    def decorator(factory: ProviderFactory) -> ProviderFactory:
        _REGISTRY[provider] = factory
        return factory

    return decorator


def registered_providers() -> tuple[Provider, ...]:
    return tuple(_REGISTRY)


def create_provider(
    provider: Provider | str,
    config: AppConfig,
    *,
    http_client: HttpClient | None = None,
) -> SummaryProvider:
    """Build the backend for `provider`, failing before any network traffic."""
    resolved = Provider.parse(provider)
    factory = _REGISTRY.get(resolved)
    if factory is None:
        raise InvalidProviderError(resolved.value, tuple(p.value for p in _REGISTRY))
    return factory(config, http_client)


@register_provider(Provider.GEMINI)
def _gemini(config: AppConfig, http_client: HttpClient | None) -> SummaryProvider:
    return GeminiBackend(
        api_key=config.gemini_api_key,
        endpoint=config.gemini_endpoint,
        generation_config=config.generation_config(),
        model=config.gemini_model,
        timeout=config.request_timeout_seconds,
        http_client=http_client,
    )


def _not_implemented(provider: Provider, label: str) -> ProviderFactory:
    def factory(config: AppConfig, http_client: HttpClient | None) -> SummaryProvider:
        raise ProviderNotImplementedError(provider.value, label)

    return factory


register_provider(Provider.OPENAI)(_not_implemented(Provider.OPENAI, "OpenAI"))
register_provider(Provider.CLAUDE)(_not_implemented(Provider.CLAUDE, "Claude"))


__all__ = [
    "ProviderFactory",
    "create_provider",
    "register_provider",
    "registered_providers",
]
