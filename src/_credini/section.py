from dataclasses import dataclass, field
from typing import Dict


@dataclass
class Section:
    """
    A section of an ini file headed by [name], holding
    the key=value pairs that follow it.
    """

    name: str
    keys: Dict[str, str] = field(default_factory=dict)

    def key_is_present(self, key):
        return key in self.keys

    def sorted_keys(self):
        return sorted(self.keys)

    def __contains__(self, key):
        return self.key_is_present(key)

    def __getitem__(self, key):
        return self.keys[key]

    def __setitem__(self, key, value):
        self.keys[key] = value

    def __str__(self):
        res = f"[{self.name}]\n"
        for key in self.sorted_keys():
            res += f"{key}={self.keys[key]}\n"
        res += "\n"
        return res
