from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple
import time

from models import Component

@dataclass
class SortMetrics:
    algorithm: str
    field: str
    time_s: float
    comparisons: int
    n: int

    @property
    def nothing_to_do(self) -> bool:
        return self.n == 0

@dataclass
class SearchMetrics:
    algorithm: str
    target: str
    index: Optional[int]
    comparisons: int
    n: int

    @property
    def found(self) -> bool:
        return self.index is not None

    @property
    def nothing_to_do(self) -> bool:
        return self.n == 0

# -------------------------------
# Comparators (sinal no estilo strcmp)
# -------------------------------
def _cmp(a, b) -> int:
    return (a > b) - (a < b)

def compare_by_name(a: Component, b: Component) -> int:
    return _cmp(a.name, b.name)

def compare_by_type(a: Component, b: Component) -> int:
    return _cmp(a.type, b.type)

def compare_by_priority(a: Component, b: Component) -> int:
    return _cmp(a.priority, b.priority)

# -------------------------------
# Bubble Sort por nome (in-place, stable)
# -------------------------------
def bubble_sort_by_name(a: List[Component]) -> int:
    n = len(a)
    comps = 0
    for i in range(n - 1):
        swapped = False
        for j in range(n - 1 - i):
            comps += 1
            if compare_by_name(a[j], a[j+1]) > 0:
                a[j], a[j+1] = a[j+1], a[j]
                swapped = True
        if not swapped:
            break
    return comps

# -------------------------------
# Insertion Sort por tipo (in-place, stable)
# -------------------------------
def insertion_sort_by_type(a: List[Component]) -> int:
    comps = 0
    for i in range(1, len(a)):
        item = a[i]
        j = i - 1
        # j < 0 encerra o laço sem contar comparação
        while j >= 0:
            comps += 1
            if compare_by_type(a[j], item) > 0:
                a[j+1] = a[j]
                j -= 1
            else:
                break
        a[j+1] = item
    return comps

# -------------------------------
# Selection Sort por prioridade (in-place, unstable)
# -------------------------------
def selection_sort_by_priority(a: List[Component]) -> int:
    n = len(a)
    comps = 0
    for i in range(n - 1):
        idx = i
        for j in range(i+1, n):
            comps += 1
            if compare_by_priority(a[j], a[idx]) < 0:
                idx = j
        if idx != i:
            a[i], a[idx] = a[idx], a[i]
    return comps

# -------------------------------
# Busca binária por nome
# -------------------------------
def binary_search_by_name(a: List[Component], target: str) -> Tuple[Optional[int], int]:
    """
    a MUST already be sorted by name in non-decreasing order.
    Returns (index or None, comparisons). Exact, case-sensitive match.
    """
    if not target:
        raise ValueError("Binary search needs a non-empty name.")
    low, high = 0, len(a) - 1
    comps = 0
    while low <= high:
        mid = low + (high - low) // 2
        comps += 1
        c = _cmp(a[mid].name, target)
        if c == 0:
            return mid, comps
        if c < 0:
            low = mid + 1
        else:
            high = mid - 1
    return None, comps

# -------------------------------
# Medidor de tempo
# -------------------------------
def measure_time(algorithm: Callable[[List[Component]], int], data: List[Component]) -> Tuple[float, int]:
    """Runs an in-place sort and returns (elapsed seconds, comparisons)."""
    t0 = time.perf_counter()
    comps = algorithm(data)
    dt = time.perf_counter() - t0
    return dt, comps

# -------------------------------
# Dispatcher helpers
# -------------------------------
SORTERS = {
    "name": ("bubble", bubble_sort_by_name),
    "type": ("insertion", insertion_sort_by_type),
    "priority": ("selection", selection_sort_by_priority),
}

def sort_components(field: str, data: List[Component]) -> SortMetrics:
    field = field.lower()
    if field not in SORTERS:
        raise ValueError(f"Unknown sort field: {field}")
    algo, fn = SORTERS[field]
    dt, comps = measure_time(fn, data)
    return SortMetrics(algo, field, dt, comps, len(data))
