"""JSON file persistence for the request document."""

import json
import os
import tempfile
from pathlib import Path
from typing import Any, Union

from ..errors import CorruptDataError, PersistenceError
from ..logging import get_logger
from ..requests.models import RequestDocument


class RequestStore:
    """
    Whole-document JSON store.

    Every mutation is load, modify in memory, save. Writes go to a temp file
    in the target directory and are moved into place with os.replace, so the
    backing file always holds either the old or the new document.
    No locking: one process at a time.
    """

    def __init__(self, data_file: Union[str, Path] = "data/requests.json", indent: int = 2):
        self.data_file = Path(data_file)
        self.indent = indent
        self.logger = get_logger("shiftswap.store")

    def load(self) -> RequestDocument:
        """
        Load the document, creating an empty one if the file is absent.

        Raises:
            CorruptDataError: content is not JSON or not document-shaped
            PersistenceError: the file could not be read or created
        """
        if not self.data_file.exists():
            document = RequestDocument()
            self.save(document)
            self.logger.info("Initialized request store", path=str(self.data_file))
            return document

        raw = self._read_json()
        try:
            document = RequestDocument.from_dict(raw)
        except ValueError as e:
            self.logger.error(
                "Request store has unexpected shape",
                path=str(self.data_file),
                error=str(e)
            )
            raise CorruptDataError(
                f"Unexpected data in {self.data_file}: {e}",
                path=str(self.data_file),
                reason=str(e),
            ) from e

        self.logger.debug(
            "Loaded request store",
            path=str(self.data_file),
            request_count=len(document.requests)
        )
        return document

    def save(self, document: RequestDocument) -> None:
        """
        Replace the backing file with the full document.

        Raises:
            PersistenceError: the directory or file could not be written, or
                the document holds text that cannot be encoded as UTF-8
        """
        payload = document.to_dict()
        self._atomic_write(payload)
        self.logger.debug(
            "Saved request store",
            path=str(self.data_file),
            request_count=len(document.requests)
        )

    def _read_json(self) -> Any:
        try:
            with open(self.data_file, encoding="utf-8") as f:
                return json.load(f)
        except json.JSONDecodeError as e:
            self.logger.error(
                "Request store is not valid JSON",
                path=str(self.data_file),
                error=str(e)
            )
            raise CorruptDataError(
                f"Invalid JSON in {self.data_file}: {e}",
                path=str(self.data_file),
                reason=str(e),
            ) from e
        except (OSError, UnicodeDecodeError) as e:
            raise PersistenceError(
                f"Could not read {self.data_file}: {e}",
                operation="read",
                target=str(self.data_file),
            ) from e

    def _atomic_write(self, payload: dict[str, Any]) -> None:
        """Write JSON to a sibling temp file, then os.replace it over the target."""
        tmp_path = None
        try:
            self.data_file.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(
                dir=self.data_file.parent,
                prefix=f".{self.data_file.stem}-",
                suffix=".tmp"
            )
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(payload, f, indent=self.indent, ensure_ascii=False)
                f.write("\n")
            os.replace(tmp_path, self.data_file)
            tmp_path = None
        except (OSError, ValueError) as e:
            self.logger.error(
                "Failed to write request store",
                path=str(self.data_file),
                error=str(e)
            )
            raise PersistenceError(
                f"Could not write {self.data_file}: {e}",
                operation="write",
                target=str(self.data_file),
            ) from e
        finally:
            if tmp_path is not None and os.path.exists(tmp_path):
                os.remove(tmp_path)
