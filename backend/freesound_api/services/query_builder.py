from __future__ import annotations

from collections.abc import Iterable

from ..schemas.freesound import SortOption


QueryPairs = list[tuple[str, str]]


def render_flag(value: bool) -> str:
    # Freesound only understands 1/0 for boolean parameters.
    return "1" if value else "0"


def as_names(values: str | Iterable[str] | None) -> list[str] | None:
    """A bare string is one name, not a sequence of characters."""
    if values is None:
        return None
    if isinstance(values, str):
        return [values]
    return [str(v) for v in values]


def _flag_or_unset(value: bool | None) -> bool | None:
    return None if value is None else bool(value)


class SearchQueryBuilder:
    """Accumulates text-search parameters and renders them as query pairs.

    Setters return the builder so calls can be chained::

        params = (
            SearchQueryBuilder()
            .query("piano")
            .filter("tag:guitar")
            .sort(SortOption.RATING_DESC)
            .page_size(15)
            .build()
        )

    Values are not range-checked; the server decides what is valid.
    Passing ``None`` to a setter clears that parameter.
    """

    def __init__(self) -> None:
        self._query: str | None = None
        self._filter: str | None = None
        self._sort: SortOption | None = None
        self._group_by_pack: bool | None = None
        self._page: int | None = None
        self._page_size: int | None = None
        self._fields: list[str] | None = None
        self._descriptors: list[str] | None = None
        self._normalized: bool | None = None

    def query(self, text: str | None) -> SearchQueryBuilder:
        self._query = text
        return self

    def filter(self, expression: str | None) -> SearchQueryBuilder:
        self._filter = expression
        return self

    def sort(self, option: SortOption | str | None) -> SearchQueryBuilder:
        self._sort = None if option is None else SortOption(option)
        return self

    def group_by_pack(self, group: bool | None) -> SearchQueryBuilder:
        self._group_by_pack = _flag_or_unset(group)
        return self

    def page(self, page: int | None) -> SearchQueryBuilder:
        self._page = page
        return self

    def page_size(self, size: int | None) -> SearchQueryBuilder:
        self._page_size = size
        return self

    def fields(self, fields: str | Iterable[str] | None) -> SearchQueryBuilder:
        self._fields = as_names(fields)
        return self

    def descriptors(self, descriptors: str | Iterable[str] | None) -> SearchQueryBuilder:
        self._descriptors = as_names(descriptors)
        return self

    def normalized(self, normalized: bool | None) -> SearchQueryBuilder:
        self._normalized = _flag_or_unset(normalized)
        return self

    def build(self) -> QueryPairs:
        """Render the parameters that were set, in the order the API documents."""
        params: QueryPairs = []
        if self._query is not None:
            params.append(("query", self._query))
        if self._filter is not None:
            params.append(("filter", self._filter))
        if self._sort is not None:
            params.append(("sort", self._sort.value))
        if self._group_by_pack is not None:
            params.append(("group_by_pack", render_flag(self._group_by_pack)))
        if self._page is not None:
            params.append(("page", str(self._page)))
        if self._page_size is not None:
            params.append(("page_size", str(self._page_size)))
        if self._fields is not None:
            params.append(("fields", ",".join(self._fields)))
        if self._descriptors is not None:
            params.append(("descriptors", ",".join(self._descriptors)))
        if self._normalized is not None:
            params.append(("normalized", render_flag(self._normalized)))
        return params
