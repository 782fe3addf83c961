"""Concrete random providers and the provider registry."""

from chaos_sequencer.data.sources.replay_source import ReplayRandomProvider
from chaos_sequencer.data.sources.secure_source import SecureRandomProvider
from chaos_sequencer.data.sources.seeded_source import SeededRandomProvider


def _secure(seed: int | None = None) -> SecureRandomProvider:
    # Secure draws are never seeded
    return SecureRandomProvider()


def _seeded(seed: int | None = None) -> SeededRandomProvider:
    return SeededRandomProvider(seed if seed is not None else 0)


# Provider registry for string-based lookup
PROVIDER_REGISTRY = {
    "secure": _secure,
    "seeded": _seeded,
}


def get_provider(provider_name: str, seed: int | None = None):
    """Build a random provider by name.

    Args:
        provider_name: Name of the provider ("secure" or "seeded")
        seed: Seed for seeded providers; ignored by the secure provider

    Returns:
        A RandomProvider instance

    Raises:
        ValueError: If provider name not found in registry
    """
    if provider_name not in PROVIDER_REGISTRY:
        available = ", ".join(PROVIDER_REGISTRY.keys())
        raise ValueError(
            f"Unknown provider '{provider_name}'. Available providers: {available}"
        )
    return PROVIDER_REGISTRY[provider_name](seed)


__all__ = [
    "ReplayRandomProvider",
    "SecureRandomProvider",
    "SeededRandomProvider",
    "PROVIDER_REGISTRY",
    "get_provider",
]
