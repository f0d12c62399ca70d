from pathlib import Path
from typing import Any, Literal, TypeAlias

FilePath: TypeAlias = Path | str

# OSF API v2 entity as returned in the `data` member of a response
OsfEntity: TypeAlias = dict[str, Any]

TransferType: TypeAlias = Literal["file", "folder"]
