# ==============================================================================
# FORM PROVIDER SELECTOR - Runtime Persistence Target for Forms
# ==============================================================================
# Process-wide provider name guarded by a lock; requests take a snapshot
# once and keep it for their whole lifetime
# ==============================================================================

from __future__ import annotations

import logging
import threading
from typing import Optional, Union

from access_admin.core.settings import settings, DatabaseProvider

logger = logging.getLogger(__name__)


class FormProviderSelector:
    """
    Holds the provider Form repositories are built for.

    Switching only changes which repository later requests receive.
    Repositories already handed out keep their adapter, and no
    connection is opened, closed or migrated by a switch.

    Example:
        >>> selector = FormProviderSelector()
        >>> selector.set_provider("mysql")
        <DatabaseProvider.MYSQL: 'mysql'>
        >>> selector.current
        <DatabaseProvider.MYSQL: 'mysql'>
    """

    def __init__(self, default: Optional[DatabaseProvider] = None) -> None:
        self._default = default or settings.DATABASE_PROVIDER
        self._provider = self._default
        self._lock = threading.Lock()

    @property
    def current(self) -> DatabaseProvider:
        """Snapshot of the active provider."""
        with self._lock:
            return self._provider

    def set_provider(self, name: Union[str, DatabaseProvider]) -> DatabaseProvider:
        """
        Switch the active provider.

        Args:
            name: Provider name in any case, or a DatabaseProvider

        Returns:
            The provider now active

        Raises:
            ValueError: If the name is not a supported provider
        """
        provider = name if isinstance(name, DatabaseProvider) else DatabaseProvider.parse(name)
        with self._lock:
            previous, self._provider = self._provider, provider
        logger.info(f"Form provider changed: {previous.value} -> {provider.value}")
        return provider

    def reset(self) -> None:
        """Return to the configured default provider."""
        with self._lock:
            self._provider = self._default


# Process-wide selector used by the API
form_provider_selector = FormProviderSelector()
