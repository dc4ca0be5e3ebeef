from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping


@dataclass(frozen=True)
class LanguageTables:
    """ Datatype labels and aliases of one language. """
    labels: Mapping[str, str] = field(default_factory=dict)
    """ User label by type id. Hidden types have no entry. """

    aliases: Mapping[str, str] = field(default_factory=dict)
    """ Type id by alias label. """

    def __post_init__(self):
        # Tables are shared by every registry built for the language
        object.__setattr__(self, "labels", MappingProxyType(dict(self.labels)))
        object.__setattr__(self, "aliases", MappingProxyType(dict(self.aliases)))
