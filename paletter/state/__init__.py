"""
Reactive state model: value-type containers plus their persistence.

- OrderedCollection: immutable list with append / replace_at / remove_at
- CyclicSelector: fixed candidates with one active entry that wraps around
- PersistentBinding: loads a key once and writes it back on change
"""

from .ordered_collection import OrderedCollection, Append, ReplaceAt, RemoveAt, Action
from .cyclic_selector import CyclicSelector
from .persistence import KeyValueStore, LocalStore, PersistentBinding

__all__ = [
    "OrderedCollection",
    "Append",
    "ReplaceAt",
    "RemoveAt",
    "Action",
    "CyclicSelector",
    "KeyValueStore",
    "LocalStore",
    "PersistentBinding",
]
