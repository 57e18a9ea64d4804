from typing import Dict, Iterable, List, Optional
from models import Component, MAX_COMPONENTS, DEFAULT_PRIORITY, make_component
import csv
import random

NAMES = [
    "chip central", "propulsor", "painel solar", "antena", "bateria",
    "radio", "sensor termico", "valvula", "cabo de fibra", "modulo de controle",
    "motor auxiliar", "filtro de ar", "bomba hidraulica", "giroscopio", "lente optica",
]
TYPES = ["estrutural", "eletronico", "suporte", "energia", "comunicacao"]

# cabeçalhos aceitos (inglês ou português)
HEADER_ALIASES = {
    "name": ("name", "nome"),
    "type": ("type", "tipo"),
    "priority": ("priority", "prioridade"),
}

def parse_priority(x: Optional[str]) -> int:
    """Non-integer text falls back to the default priority (still clamped later)."""
    try:
        return int(str(x).strip())
    except (TypeError, ValueError):
        return DEFAULT_PRIORITY

def resolve_headers(fieldnames: Iterable[str]) -> Dict[str, Optional[str]]:
    by_lower = {h.strip().lower(): h for h in fieldnames}
    mapping: Dict[str, Optional[str]] = {}
    for field, aliases in HEADER_ALIASES.items():
        mapping[field] = next((by_lower[a] for a in aliases if a in by_lower), None)
    return mapping

def rows_to_components(rows: Iterable[Dict[str, str]], mapping: Dict[str, Optional[str]]) -> List[Component]:
    comps: List[Component] = []
    for r in rows:
        if len(comps) == MAX_COMPONENTS:
            break
        name = (r.get(mapping["name"]) or "").strip()
        type_ = (r.get(mapping["type"]) or "").strip()
        prio = parse_priority(r.get(mapping["priority"]))
        comps.append(make_component(name, type_, prio))
    return comps

def read_components(reader: csv.DictReader) -> List[Component]:
    """Validates the header row and maps the rows; malformed CSV surfaces as ValueError."""
    try:
        mapping = resolve_headers(reader.fieldnames or [])
        missing = [k for k, v in mapping.items() if v is None]
        if missing:
            raise ValueError(f"CSV must have headers: {sorted(HEADER_ALIASES)} (missing {missing})")
        return rows_to_components(reader, mapping)
    except csv.Error as e:
        raise ValueError(f"CSV malformado: {e}") from e

def parse_csv(path: str) -> List[Component]:
    # utf-8-sig: aceita o BOM que o Excel grava
    with open(path, newline="", encoding="utf-8-sig") as f:
        return read_components(csv.DictReader(f))

def write_csv(path: str, components: Iterable[Component]):
    with open(path, "w", newline="", encoding="utf-8") as f:
        w = csv.writer(f)
        w.writerow(["name", "type", "priority"])
        for c in components:
            w.writerow(c.as_row())

def generate_synthetic(n: int = 10, seed: int = 42) -> List[Component]:
    rng = random.Random(seed)
    n = max(0, min(n, MAX_COMPONENTS))
    comps: List[Component] = []
    for i in range(n):
        base = NAMES[i % len(NAMES)]
        # nomes repetem depois de esgotar a lista; sufixo mantém únicos
        name = base if i < len(NAMES) else f"{base} {i // len(NAMES) + 1}"
        comps.append(make_component(name, rng.choice(TYPES), rng.randint(1, 10)))
    rng.shuffle(comps)
    return comps
