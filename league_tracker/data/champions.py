"""Champion catalog with search, role filter and name sort."""

import json
import locale
import logging
from pathlib import Path
from typing import Iterator, List, Optional, Sequence

from .models import ChampionRecord, FilterCriteria, Role, SortOrder

DEFAULT_DATASET = Path(__file__).with_name("champions.json")


def _title_key(record: ChampionRecord) -> str:
    return locale.strxfrm(record.title.casefold())


class ChampionCatalog:
    """Immutable list of champions loaded once at startup.

    ``derive`` produces the visible view for a set of filters; the catalog
    itself never changes.
    """

    def __init__(self, records: Sequence[ChampionRecord]):
        self._records = tuple(records)
        self.logger = logging.getLogger(__name__)

    @classmethod
    def load(cls, path: Optional[Path] = None) -> "ChampionCatalog":
        """Load champions from a JSON list (the bundled dataset by default).

        Raises:
            ValueError: If a record has an unknown or ``All`` category
        """
        dataset = Path(path) if path else DEFAULT_DATASET
        with open(dataset, "r", encoding="utf-8") as f:
            raw = json.load(f)
        catalog = cls(ChampionRecord.from_dict(item) for item in raw)
        catalog.logger.info(f"Loaded {len(catalog)} champions from {dataset.name}")
        return catalog

    def derive(self, criteria: Optional[FilterCriteria] = None) -> List[ChampionRecord]:
        """Return the champions matching ``criteria`` in display order.

        Filters by title substring (case-insensitive) and role first, then
        sorts. ``Default`` keeps catalog order and ``Z-A`` is the exact
        reverse of ``A-Z``.
        """
        criteria = criteria or FilterCriteria()
        records = list(self._records)

        if criteria.query:
            needle = criteria.query.casefold()
            records = [r for r in records if needle in r.title.casefold()]

        if criteria.role is not Role.ALL:
            records = [r for r in records if r.category is criteria.role]

        if criteria.sort_order is SortOrder.DEFAULT:
            return records

        ascending = sorted(records, key=_title_key)
        if criteria.sort_order is SortOrder.DESCENDING:
            ascending.reverse()
        return ascending

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[ChampionRecord]:
        return iter(self._records)
