from dataclasses import dataclass
from typing import Optional

MAX_COMPONENTS = 20
MAX_NAME = 29        # caracteres úteis do nome
MAX_TYPE = 19        # caracteres úteis do tipo
MIN_PRIORITY = 1
MAX_PRIORITY = 10

DEFAULT_NAME = "Componente sem nome"
DEFAULT_TYPE = "geral"
DEFAULT_PRIORITY = 5

@dataclass
class Component:
    name: str
    type: str
    priority: int        # 1..10

    def as_row(self):
        return [self.name, self.type, f"{self.priority}"]

def clamp_priority(p: Optional[int]) -> int:
    if p is None:
        p = DEFAULT_PRIORITY
    return max(MIN_PRIORITY, min(MAX_PRIORITY, int(p)))

def make_component(name: Optional[str], type_: Optional[str], priority: Optional[int]) -> Component:
    """Builds a valid Component: blank fields get placeholders, long text is cut, priority is clamped."""
    name = (name or "")[:MAX_NAME]
    type_ = (type_ or "")[:MAX_TYPE]
    return Component(
        name=name or DEFAULT_NAME,
        type=type_ or DEFAULT_TYPE,
        priority=clamp_priority(priority),
    )
