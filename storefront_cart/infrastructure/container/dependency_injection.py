"""
Dependency Injection Container

Builds the storage backend, notifier and cart stores from settings.
"""

import logging
from typing import Any, Dict, Optional, Union

from storefront_cart.application.use_cases.cart_store import CartStore, cart_storage_key_for
from storefront_cart.application.use_cases.checkout_summary_use_case import (
    CheckoutSummaryUseCase,
)
from storefront_cart.domain.repositories.cart_notifier import CartNotifier
from storefront_cart.domain.repositories.cart_storage import CartStorage
from storefront_cart.infrastructure.configuration.config import Settings, get_config
from storefront_cart.infrastructure.database.operations import DatabaseManager
from storefront_cart.infrastructure.logging.logging_config import (
    LoggingConfigOptions,
    setup_logging,
)
from storefront_cart.infrastructure.repositories.in_memory_cart_storage import (
    InMemoryCartStorage,
)
from storefront_cart.infrastructure.repositories.json_file_cart_storage import (
    JsonFileCartStorage,
)
from storefront_cart.infrastructure.repositories.sqlalchemy_cart_storage import (
    SQLAlchemyCartStorage,
)
from storefront_cart.infrastructure.services.notification_service import LoggingCartNotifier
from storefront_cart.infrastructure.utilities.constants import StorageBackends


class DependencyContainer:
    """
    Dependency injection container

    Manages the instantiation and lifecycle of:
    - The cart storage backend (Infrastructure layer)
    - The notifier (Infrastructure layer)
    - Cart stores and checkout use cases (Application layer)

    Applications pass configure_logging=True to have logging set up from
    settings; libraries and tests leave the root logger alone.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        storage: Optional[CartStorage] = None,
        notifier: Optional[CartNotifier] = None,
        configure_logging: bool = False,
    ):
        self._settings = settings or get_config()
        self._instances: Dict[str, Any] = {}
        self._logger = logging.getLogger(self.__class__.__name__)
        if configure_logging:
            self._instances["logging_config"] = setup_logging(
                LoggingConfigOptions.from_settings(self._settings)
            )
        self._setup_dependencies(storage, notifier)

    def _setup_dependencies(
        self, storage: Optional[CartStorage], notifier: Optional[CartNotifier]
    ) -> None:
        self._logger.info("Setting up dependency injection container...")

        self._instances["cart_storage"] = storage or self._create_storage()
        self._instances["cart_notifier"] = notifier or LoggingCartNotifier()

        self._logger.info(
            "Dependency injection container setup complete (storage: %s)",
            type(self._instances["cart_storage"]).__name__,
        )

    def _create_storage(self) -> CartStorage:
        backend = self._settings.storage_backend

        if backend == StorageBackends.FILE:
            return JsonFileCartStorage(self._settings.storage_dir)

        if backend == StorageBackends.DATABASE:
            db_manager = DatabaseManager(
                self._settings.database_url,
                echo=self._settings.environment == "development"
                and self._settings.log_level.upper() == "DEBUG",
            )
            self._instances["db_manager"] = db_manager
            return SQLAlchemyCartStorage(db_manager)

        return InMemoryCartStorage()

    @property
    def settings(self) -> Settings:
        return self._settings

    def get_cart_storage(self) -> CartStorage:
        return self._instances["cart_storage"]

    def get_cart_notifier(self) -> CartNotifier:
        return self._instances["cart_notifier"]

    def get_cart_store(self, user_id: Optional[Union[str, int]] = None) -> CartStore:
        """Cart store for an anonymous session or a signed-in user, one per key"""
        key = cart_storage_key_for(self._settings.cart_storage_key, user_id)
        instance_name = f"cart_store:{key}"

        if instance_name not in self._instances:
            self._instances[instance_name] = CartStore(
                storage=self.get_cart_storage(),
                notifier=self.get_cart_notifier(),
                storage_key=key,
                currency=self._settings.currency,
            )
        return self._instances[instance_name]

    def get_checkout_summary_use_case(
        self, user_id: Optional[Union[str, int]] = None
    ) -> CheckoutSummaryUseCase:
        return CheckoutSummaryUseCase(self.get_cart_store(user_id))

    def shutdown(self) -> None:
        """Release database connections, if any"""
        db_manager = self._instances.get("db_manager")
        if db_manager is not None:
            db_manager.dispose()
