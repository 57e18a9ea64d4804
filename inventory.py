import logging
from typing import Iterable, Iterator, List, Sequence, Tuple, Union

from models import Component, MAX_COMPONENTS, make_component
from algorithms import SortMetrics, SearchMetrics, SORTERS, sort_components, binary_search_by_name

log = logging.getLogger(__name__)

RawEntry = Union[Component, Tuple[str, str, int], Sequence]

class NotSortedByNameError(RuntimeError):
    """Binary search was requested while the components are not sorted by name."""

class Inventory:
    """
    Session state: the registered components plus the `sorted_by_name` flag.

    Every method that reorders `components` also sets the flag, so the two
    never drift apart. Only a name sort sets it; registration and the other
    sorts clear it.
    """

    def __init__(self):
        self.components: List[Component] = []
        self.sorted_by_name = False

    @property
    def n(self) -> int:
        return len(self.components)

    def __len__(self) -> int:
        return len(self.components)

    def __iter__(self) -> Iterator[Component]:
        return iter(self.components)

    def get(self, index: int) -> Component:
        return self.components[index]

    # ---------------- Cadastro ----------------
    def register(self, batch: Iterable[RawEntry]) -> int:
        entries = list(batch)
        if len(entries) > MAX_COMPONENTS:
            raise ValueError(f"At most {MAX_COMPONENTS} components per batch (got {len(entries)}).")
        comps = []
        for e in entries:
            if isinstance(e, Component):
                e = (e.name, e.type, e.priority)
            name, type_, priority = e
            comps.append(make_component(name, type_, priority))
        self.components = comps
        self.sorted_by_name = False   # novo cadastro invalida ordenação
        log.info("Registered %d components", len(comps))
        return len(comps)

    # ---------------- Ordenação ----------------
    def _sort(self, field: str) -> SortMetrics:
        if not self.components:
            log.debug("Sort by %s skipped: no components", field)
            return SortMetrics(SORTERS[field][0], field, 0.0, 0, 0)
        sm = sort_components(field, self.components)
        self.sorted_by_name = (field == "name")
        log.info("Sorted %d by %s (%s): comparisons=%d time=%.6fs",
                 sm.n, field, sm.algorithm, sm.comparisons, sm.time_s)
        return sm

    def sort_by_name(self) -> SortMetrics:
        return self._sort("name")

    def sort_by_type(self) -> SortMetrics:
        return self._sort("type")

    def sort_by_priority(self) -> SortMetrics:
        return self._sort("priority")

    # ---------------- Busca ----------------
    def search_by_name(self, key: str) -> SearchMetrics:
        if not self.components:
            log.debug("Search for %r skipped: no components", key)
            return SearchMetrics("binary", key, None, 0, 0)
        if not self.sorted_by_name:
            log.warning("Binary search refused: components are not sorted by name")
            raise NotSortedByNameError("Binary search requires the components sorted by name.")
        if not key:
            raise ValueError("Search key must be a non-empty name.")
        idx, comps = binary_search_by_name(self.components, key)
        log.info("Binary search for %r: index=%s comparisons=%d", key, idx, comps)
        return SearchMetrics("binary", key, idx, comps, len(self.components))
