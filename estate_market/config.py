"""Configuration management for estate-market."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal, InvalidOperation
from pathlib import Path

from estate_market.exceptions import ConfigurationError

STORAGE_BACKENDS = ("memory", "json")


@dataclass
class StorageConfig:
    """Persistence configuration.

    Each collection is written independently under its own key.
    """

    backend: str = "json"
    data_dir: Path = field(default_factory=lambda: Path("data"))
    pretty_json: bool = False
    properties_key: str = "properties"
    orders_key: str = "orders"
    subscriptions_key: str = "subscriptions"
    wishlist_key: str = "wishlist"
    apartments_key: str = "apartments"
    contracts_prefix: str = "contracts"

    def __post_init__(self) -> None:
        if self.backend not in STORAGE_BACKENDS:
            raise ConfigurationError(
                f"Unknown storage backend {self.backend!r}; expected one of {STORAGE_BACKENDS}"
            )
        self.data_dir = Path(self.data_dir)


@dataclass
class CatalogConfig:
    """Seed sizes and listing limits for the catalogs."""

    sample_count: int = 20
    extra_count: int = 50
    apartment_count: int = 20
    extra_apartment_count: int = 30
    seed: int | None = 42
    seed_epoch: datetime = field(
        default_factory=lambda: datetime(2024, 2, 1, tzinfo=timezone.utc)
    )
    list_limit: int = 200

    def __post_init__(self) -> None:
        for name in ("sample_count", "extra_count", "apartment_count", "extra_apartment_count"):
            if getattr(self, name) < 0:
                raise ConfigurationError(f"{name} must be >= 0")
        if self.list_limit <= 0:
            raise ConfigurationError("list_limit must be > 0")


@dataclass
class OrderConfig:
    """Order pricing and contract signing configuration."""

    commission_rate: Decimal = Decimal("0.01599")
    commission_flat: int = 1599
    signing_delay_seconds: float = 1.5
    currency_symbol: str = "₹"

    def __post_init__(self) -> None:
        if self.signing_delay_seconds < 0:
            raise ConfigurationError("signing_delay_seconds must be >= 0")


@dataclass
class MarketConfig:
    """Main configuration for estate-market."""

    storage: StorageConfig = field(default_factory=StorageConfig)
    catalog: CatalogConfig = field(default_factory=CatalogConfig)
    orders: OrderConfig = field(default_factory=OrderConfig)
    log_level: str = "INFO"
    log_format: str = "standard"

    @classmethod
    def from_env(cls) -> "MarketConfig":
        """Create config from environment variables."""
        import os

        try:
            storage = StorageConfig(
                backend=os.getenv("MARKET_STORAGE_BACKEND", "json"),
                data_dir=Path(os.getenv("MARKET_DATA_DIR", "data")),
                pretty_json=os.getenv("MARKET_PRETTY_JSON", "false").lower() == "true",
            )

            seed_str = os.getenv("MARKET_SEED")
            catalog = CatalogConfig(
                sample_count=int(os.getenv("MARKET_SAMPLE_COUNT", "20")),
                extra_count=int(os.getenv("MARKET_EXTRA_COUNT", "50")),
                seed=int(seed_str) if seed_str else 42,
            )

            orders = OrderConfig(
                commission_rate=Decimal(os.getenv("MARKET_COMMISSION_RATE", "0.01599")),
                signing_delay_seconds=float(os.getenv("MARKET_SIGNING_DELAY", "1.5")),
            )
        except (ValueError, InvalidOperation) as e:
            raise ConfigurationError(f"Invalid environment configuration: {e}") from e

        return cls(
            storage=storage,
            catalog=catalog,
            orders=orders,
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_format=os.getenv("LOG_FORMAT", "standard"),
        )
