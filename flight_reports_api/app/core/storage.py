"""
JSON document storage.

The service keeps two independent JSON documents on local storage:
the flight catalog (read once at startup) and the report collection
(rewritten wholesale after every mutation).  This module provides the
two primitives both need: reading a whole document and replacing a
whole document.  There is no incremental format.

Writes go to a temporary file in the target directory which is then
moved over the destination, so a failed write never leaves a
truncated document behind.
"""

import json
import os
import tempfile
from pathlib import Path
from typing import Any, Union

PathLike = Union[str, Path]


def read_json(path: PathLike) -> Any:
    """Parse and return the JSON document at ``path``.

    Raises ``FileNotFoundError`` if the file does not exist,
    ``OSError`` if it cannot be read and ``ValueError`` (including
    ``json.JSONDecodeError``) if it is not valid JSON.
    """
    with open(path, "r", encoding="utf-8-sig") as f:
        return json.load(f)


def write_json(path: PathLike, data: Any) -> None:
    """Replace the document at ``path`` with ``data`` serialized as JSON.

    Missing parent directories are created.  Raises ``OSError`` when
    the document cannot be written; the previous document, if any, is
    left untouched in that case.
    """
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(prefix=f".{target.name}.", suffix=".tmp", dir=target.parent)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            json.dump(data, f, ensure_ascii=False, indent=2)
        os.replace(tmp_name, target)
    except BaseException:
        try:
            os.unlink(tmp_name)
        except FileNotFoundError:
            pass
        raise
