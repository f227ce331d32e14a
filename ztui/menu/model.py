from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Sequence, Tuple, Union

from ztui.exceptions import MenuConfigError

QUIT_LABEL = "Quit"

ChildSpec = Union[str, Sequence[str], None]


def split_children(spec: ChildSpec) -> List[str]:
    """Turn a child specification into an ordered list of labels.

    A string is split on whitespace ("New Open Save" -> three labels) and an
    empty string or None means the label has no submenu.
    """
    if spec is None:
        return []
    if isinstance(spec, str):
        return spec.split()
    if not isinstance(spec, (list, tuple)):
        raise MenuConfigError(f"Submenu must be a string or a list of strings, got {spec!r}")
    children = []
    for child in spec:
        if not isinstance(child, str):
            raise MenuConfigError(f"Submenu entries must be strings, got {child!r}")
        children.append(child)
    return children


@dataclass(frozen=True)
class MenuModel:
    labels: Tuple[str, ...] = ()
    children: Dict[str, Tuple[str, ...]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        seen = set()
        for label in self.labels:
            if label in seen:
                raise MenuConfigError(f"Duplicate menu label: {label}", label=label)
            seen.add(label)
        unknown = set(self.children) - seen
        if unknown:
            raise MenuConfigError(
                f"Submenu defined for unknown label(s): {', '.join(sorted(unknown))}"
            )

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, ChildSpec]) -> MenuModel:
        labels = []
        children = {}
        for label, spec in mapping.items():
            if not isinstance(label, str) or not label:
                raise MenuConfigError(f"Menu labels must be non-empty strings, got {label!r}")
            labels.append(label)
            children[label] = tuple(split_children(spec))
        return cls(labels=tuple(labels), children=children)

    def __len__(self) -> int:
        return len(self.labels)

    def children_of(self, label: str) -> Tuple[str, ...]:
        return self.children.get(label, ())
