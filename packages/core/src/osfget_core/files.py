"""
Class for storing references to files and directories hosted on OSF.

Date: 2026-10-18

Last updated: 2026-10-18
"""

from __future__ import annotations

from typing import Any

import polars as pl

from osfget_core.util.alltypes import OsfEntity
from osfget_core.util.exceptions import AmbiguousInputError, OsfMetadataError

REQUIRED_COLUMNS: tuple[str, ...] = ("name", "id", "meta")


class OsfFileTable:
    """
    Table of OSF files and directories. Each row references one remote
    file or directory.

    Attributes
    ----------
    data: pl.DataFrame
        Polars DataFrame with columns `name`, `id`, `local_path` and `meta`.
        `meta` holds the raw OSF API entity for each row and `local_path`
        holds the path a row was downloaded to, or null.

    Methods
    -------
    from_api()
        Creates an OsfFileTable from OSF API v2 file entities.

    make_single()
        Checks that the table references exactly one file.

    row()
        Returns a single row as a new OsfFileTable.

    set_local_path()
        Records where the file was downloaded to.

    to_dicts()
        Returns rows as a list of dictionaries.

    Properties
    ----------
    id: str
        OSF GUID of the first file.

    is_dir: bool
        Indicates if the first row is a directory.

    kind: str
        `file` or `folder` for the first row.

    local_path: str | None
        Local path of the first row.

    meta: dict
        Raw OSF entity for the first row.

    name: str
        Name of the first file on OSF.

    parent_id: str
        ID of the OSF node (project or component) holding the first file.

    Examples
    --------
    >>> from osfget_core.files import OsfFileTable
    >>> files = OsfFileTable.from_api([entity])
    >>> files.name
    'plan.docx'

    """

    def __init__(self, data: pl.DataFrame):
        missing = [col for col in REQUIRED_COLUMNS if col not in data.columns]
        if missing:
            raise ValueError(f"OsfFileTable is missing columns {missing}.")

        if "local_path" not in data.columns:
            data = data.clone()
            data.insert_column(
                data.columns.index("meta"),
                pl.Series("local_path", [None] * data.height, dtype=pl.String),
            )

        self.data: pl.DataFrame = data

    def __len__(self) -> int:
        return self.data.height

    def __repr__(self) -> str:
        return f"OsfFileTable(n={self.height}, names={self.data['name'].to_list()})"

    @classmethod
    def from_api(cls, entities: list[OsfEntity]) -> OsfFileTable:
        """Create a table from OSF API v2 file entities.

        Arguments:
            entities (list[dict]):
                Entities from the `data` member of OSF API responses.

        Returns:
            An OsfFileTable with one row per entity.
        """
        names, ids = [], []
        for entity in entities:
            try:
                ids.append(str(entity["id"]))
                names.append(str(entity["attributes"]["name"]))
            except (KeyError, TypeError) as e:
                raise OsfMetadataError(
                    f"OSF entity is missing required field {e}."
                ) from e

        data = pl.DataFrame(
            [
                pl.Series("name", names, dtype=pl.String),
                pl.Series("id", ids, dtype=pl.String),
                pl.Series("local_path", [None] * len(ids), dtype=pl.String),
                pl.Series("meta", entities, dtype=pl.Object),
            ]
        )
        return cls(data)

    def make_single(self) -> OsfFileTable:
        """Return `self` if it references exactly one file."""
        if self.height != 1:
            raise AmbiguousInputError(
                f"Expected a table with a single file or directory, got {self.height} rows."
            )
        return self

    def row(self, index: int) -> OsfFileTable:
        """Return row `index` as a new single-row table."""
        if not -self.height <= index < self.height:
            raise IndexError(f"Row {index} out of range for {self.height} rows.")
        return OsfFileTable(self.data.slice(index % self.height, 1))

    def set_local_path(self, path: str) -> OsfFileTable:
        """Set `local_path` for every row. Updates in place and returns `self`."""
        self.data.replace_column(
            self.data.columns.index("local_path"),
            pl.Series("local_path", [path] * self.height, dtype=pl.String),
        )
        return self

    def to_dicts(self) -> list[dict[str, Any]]:
        """Return rows as dictionaries."""
        return list(self.data.iter_rows(named=True))

    @property
    def height(self) -> int:
        """Number of rows."""
        return self.data.height

    @property
    def id(self) -> str:
        return self._first("id")

    @property
    def is_dir(self) -> bool:
        return self.kind == "folder"

    @property
    def kind(self) -> str:
        try:
            return self.meta["attributes"]["kind"]
        except (KeyError, TypeError) as e:
            raise OsfMetadataError(
                f"Could not determine the kind of OSF file {self.id}."
            ) from e

    @property
    def local_path(self) -> str | None:
        return self._first("local_path")

    @property
    def meta(self) -> OsfEntity:
        return self._first("meta")

    @property
    def name(self) -> str:
        return self._first("name")

    @property
    def parent_id(self) -> str:
        # files are linked to their node as relationships.node
        node = self.meta.get("relationships", {}).get("node", {})

        node_id = (node.get("data") or {}).get("id")
        if node_id:
            return node_id

        # looks like https://api.osf.io/v2/nodes/<id>/
        href = node.get("links", {}).get("related", {}).get("href")
        if href:
            return href.rstrip("/").rsplit("/", maxsplit=1)[-1]

        raise OsfMetadataError(f"OSF file {self.id} has no parent node.")

    def _first(self, column: str) -> Any:
        if self.height == 0:
            raise AmbiguousInputError("OsfFileTable is empty.")
        return self.data[column][0]
