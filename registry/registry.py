from dataclasses import dataclass, field
from typing import Dict, List


@dataclass
class RegistryItem:
    key: str
    prompt_text: str


@dataclass
class Registry:
    """Named lookup of prompt fragments, keyed by strategy tag or policy name."""

    name: str
    items: Dict[str, RegistryItem] = field(default_factory=dict)

    def register(self, key: str, prompt_text: str) -> None:
        self.items[key] = RegistryItem(key=key, prompt_text=prompt_text)

    def get(self, key: str) -> RegistryItem | None:
        return self.items.get(key)

    def keys(self) -> List[str]:
        return list(self.items)

    def __contains__(self, key: str) -> bool:
        return key in self.items
