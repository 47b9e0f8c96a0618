"""
JSON document store for student records.

The whole collection lives in one file shaped like::

    {"students": [ {...}, {...} ]}

``JsonStudentStore.load`` reads and parses that file, and
``JsonStudentStore.save`` rewrites it completely.  There are no
incremental writes.

Loading never fails: a missing file is the normal first‑run case, and
an unreadable or malformed file is logged as a warning and treated as
an empty collection so the service stays available.  The next
successful write replaces the damaged file, so the warning is the only
trace of the lost content.

Saving goes through a temporary file in the same directory followed by
``os.replace``, so a reader sees either the old document or the new
one, never a half written file.  Any write error is raised as
``PersistenceFailure``.
"""

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Union

from pydantic import ValidationError

from ..schemas.student import StudentCollection
from .errors import PersistenceFailure


logger = logging.getLogger(__name__)


class JsonStudentStore:
    """Load/save the student collection from/to a JSON file."""

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path)

    def load(self) -> StudentCollection:
        """Return the stored collection, or an empty one if it cannot be read."""
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                raw = json.load(f)
        except FileNotFoundError:
            logger.debug("Data file %s does not exist yet; starting empty", self.path)
            return StudentCollection()
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            logger.warning("Could not read data file %s (%s); using an empty collection", self.path, e)
            return StudentCollection()

        if not isinstance(raw, dict) or not isinstance(raw.get("students"), list):
            logger.warning("Data file %s has no 'students' array; using an empty collection", self.path)
            return StudentCollection()
        try:
            return StudentCollection.model_validate(raw)
        except ValidationError as e:
            logger.warning(
                "Data file %s contains malformed records (%d errors); using an empty collection",
                self.path,
                e.error_count(),
            )
            return StudentCollection()

    def save(self, collection: StudentCollection) -> None:
        """Atomically replace the data file with ``collection``."""
        content = json.dumps(collection.to_dict(), indent=2, ensure_ascii=False)
        tmp_name = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{self.path.name}.", suffix=".tmp", dir=str(self.path.parent)
            )
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(content)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_name, self.path)
            tmp_name = None
        except OSError as e:
            logger.error("Failed to write data file %s: %s", self.path, e)
            raise PersistenceFailure(f"could not write {self.path}: {e}") from e
        finally:
            if tmp_name is not None:
                try:
                    os.unlink(tmp_name)
                except OSError:
                    logger.warning("Could not remove temporary file %s", tmp_name)
