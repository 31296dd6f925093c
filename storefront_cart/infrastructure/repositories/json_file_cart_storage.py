"""
JSON file cart storage

One file per storage key inside a directory, the server-side analogue of
browser local storage.
"""

import logging
import os
import tempfile
from pathlib import Path
from typing import Optional, Union
from urllib.parse import quote

from storefront_cart.domain.repositories.cart_storage import CartStorage
from storefront_cart.infrastructure.utilities.constants import FileSettings
from storefront_cart.infrastructure.utilities.exceptions import PersistenceUnavailableError


class JsonFileCartStorage(CartStorage):
    """Stores each payload as <directory>/<key>.json"""

    def __init__(self, directory: Union[str, Path]):
        self._directory = Path(directory)
        self._logger = logging.getLogger(self.__class__.__name__)

    @property
    def directory(self) -> Path:
        return self._directory

    def path_for(self, key: str) -> Path:
        """File used for a key; the name is the percent-encoded key, one file per key"""
        if not key:
            raise ValueError("Storage key cannot be empty")
        safe_name = quote(key, safe="")
        return self._directory / f"{safe_name}{FileSettings.CART_FILE_SUFFIX}"

    def load(self, key: str) -> Optional[str]:
        path = self.path_for(key)
        try:
            return path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except (OSError, UnicodeDecodeError) as e:
            self._logger.error("💥 CART FILE READ FAILED: %s: %s", path, e)
            raise PersistenceUnavailableError(f"Cannot read {path}: {e}", operation="load") from e

    def save(self, key: str, value: str) -> None:
        path = self.path_for(key)
        try:
            self._directory.mkdir(parents=True, exist_ok=True)
            # Write to a sibling temp file and rename so readers never see a partial file
            fd, tmp_name = tempfile.mkstemp(dir=self._directory, prefix=".cart-", suffix=".tmp")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as handle:
                    handle.write(value)
                os.replace(tmp_name, path)
            except OSError:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as e:
            self._logger.error("💥 CART FILE WRITE FAILED: %s: %s", path, e)
            raise PersistenceUnavailableError(f"Cannot write {path}: {e}", operation="save") from e

        self._logger.debug("💾 SAVED: %s", path)

    def delete(self, key: str) -> None:
        path = self.path_for(key)
        try:
            path.unlink(missing_ok=True)
        except OSError as e:
            self._logger.error("💥 CART FILE DELETE FAILED: %s: %s", path, e)
            raise PersistenceUnavailableError(f"Cannot delete {path}: {e}", operation="delete") from e
