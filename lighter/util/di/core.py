"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from lighter.config import ListingSettings, ReconcileSettings, Settings
from lighter.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_listing_settings(self, settings: Settings) -> ListingSettings:
        """Provide question listing settings."""
        return settings.listing

    @provide(scope=Scope.APP)
    def provide_reconcile_settings(self, settings: Settings) -> ReconcileSettings:
        """Provide reconciliation settings."""
        return settings.reconcile
