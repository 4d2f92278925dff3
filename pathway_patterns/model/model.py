"""
Read-only access to a pathway model.

Pattern constraints never touch element fields directly. They go through
`ModelInterface`, which exposes one typed accessor per structural relation
(controllers of a control, components of a complex, and so on) in both
directions. `InMemoryModel` is the implementation used by the scripts and the
tests: it keeps the elements in insertion order and maintains the inverse
indexes as elements are added.

Dangling references (a URI that names no element of the model) are skipped by
every accessor.
"""

import json
import logging
from abc import ABC, abstractmethod
from collections import defaultdict
from pathlib import Path
from typing import Iterable, Iterator, TypeVar

from .elements import (
    ELEMENT_TYPES,
    BioPAXElement,
    Complex,
    Control,
    Conversion,
    EntityReference,
    Interaction,
    Pathway,
    PhysicalEntity,
    SimplePhysicalEntity,
    TemplateReaction,
)
from .vocab import ConversionDirection

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=BioPAXElement)


class ModelInterface(ABC):
    """Abstract read-only view of a pathway model."""

    @abstractmethod
    def get(self, uri: str) -> BioPAXElement | None:
        """Return the element with this URI, if any."""
        pass

    @abstractmethod
    def elements(self, of_type: type[E] | None = None) -> list[E]:
        """All elements in model order, optionally only instances of `of_type`."""
        pass

    @abstractmethod
    def controllers(self, control: Control) -> list[BioPAXElement]:
        """Physical entities and pathways controlling `control`."""
        pass

    @abstractmethod
    def controlled(self, control: Control) -> list[BioPAXElement]:
        """Interactions, pathways or controls that `control` regulates."""
        pass

    @abstractmethod
    def controlled_of(self, element: BioPAXElement) -> list[Control]:
        """Controls that regulate `element`."""
        pass

    @abstractmethod
    def controller_of(self, element: BioPAXElement) -> list[Control]:
        """Controls in which `element` is a controller."""
        pass

    @abstractmethod
    def left(self, conversion: Conversion) -> list[PhysicalEntity]:
        pass

    @abstractmethod
    def right(self, conversion: Conversion) -> list[PhysicalEntity]:
        pass

    @abstractmethod
    def participant_of(self, entity: PhysicalEntity) -> list[BioPAXElement]:
        """Interactions in which `entity` is a left, right, template, product or plain participant."""
        pass

    @abstractmethod
    def template(self, reaction: TemplateReaction) -> PhysicalEntity | None:
        pass

    @abstractmethod
    def products(self, reaction: TemplateReaction) -> list[PhysicalEntity]:
        pass

    @abstractmethod
    def product_of(self, entity: PhysicalEntity) -> list[TemplateReaction]:
        pass

    @abstractmethod
    def components(self, complex_: Complex) -> list[PhysicalEntity]:
        pass

    @abstractmethod
    def component_of(self, entity: PhysicalEntity) -> list[Complex]:
        pass

    @abstractmethod
    def members(self, entity: PhysicalEntity) -> list[PhysicalEntity]:
        """Specific entities that a generic entity stands for."""
        pass

    @abstractmethod
    def member_of(self, entity: PhysicalEntity) -> list[PhysicalEntity]:
        """Generic entities listing `entity` as a member."""
        pass

    @abstractmethod
    def entity_reference(self, entity: SimplePhysicalEntity) -> EntityReference | None:
        pass

    @abstractmethod
    def entity_reference_of(self, reference: EntityReference) -> list[SimplePhysicalEntity]:
        pass

    @abstractmethod
    def pathway_components(self, pathway: Pathway) -> list[BioPAXElement]:
        pass

    def inputs(self, conversion: Conversion) -> list[PhysicalEntity]:
        """Consumed side of a conversion, honouring `conversion_direction`."""
        if conversion.conversion_direction == ConversionDirection.RIGHT_TO_LEFT:
            return self.right(conversion)
        return self.left(conversion)

    def outputs(self, conversion: Conversion) -> list[PhysicalEntity]:
        """Produced side of a conversion, honouring `conversion_direction`."""
        if conversion.conversion_direction == ConversionDirection.RIGHT_TO_LEFT:
            return self.left(conversion)
        return self.right(conversion)

    def __len__(self) -> int:
        return len(self.elements())

    def __iter__(self) -> Iterator[BioPAXElement]:
        return iter(self.elements())

    def __contains__(self, element: object) -> bool:
        if isinstance(element, BioPAXElement):
            return self.get(element.uri) == element
        return False


class InMemoryModel(ModelInterface):
    """
    Pathway model held in memory.

    Elements are stored by URI in insertion order. Inverse relations
    (controlled-of, component-of, entity-reference-of, ...) are indexed when an
    element is added, so lookups in either direction are dictionary reads.

    Example:
        >>> model = InMemoryModel()
        >>> model.add(ProteinReference(uri="PR1"))
        >>> model.add(Protein(uri="P1", entity_reference="PR1"))
        >>> [p.uri for p in model.entity_reference_of(model.get("PR1"))]
        ['P1']
    """

    def __init__(self, elements: Iterable[BioPAXElement] = ()):
        self._elements: dict[str, BioPAXElement] = {}
        self._inverse: dict[str, dict[str, list[str]]] = defaultdict(lambda: defaultdict(list))
        for element in elements:
            self.add(element)

    # ------------------------------------------------------------------ build

    def add(self, element: BioPAXElement) -> None:
        """Add an element; a second element with the same URI is rejected."""
        if element.uri in self._elements:
            raise ValueError(f"Duplicate element URI {element.uri!r}")
        self._elements[element.uri] = element

        if isinstance(element, Control):
            self._index("controlled_of", element.controlled, element.uri)
            self._index("controller_of", element.controller, element.uri)
        if isinstance(element, Conversion):
            self._index("participant_of", element.left, element.uri)
            self._index("participant_of", element.right, element.uri)
        if isinstance(element, TemplateReaction):
            self._index("product_of", element.product, element.uri)
            if element.template:
                self._index("participant_of", [element.template], element.uri)
            self._index("participant_of", element.product, element.uri)
        if isinstance(element, Interaction) and not isinstance(element, Control):
            self._index("participant_of", element.participant, element.uri)
        if isinstance(element, Complex):
            self._index("component_of", element.component, element.uri)
        if isinstance(element, PhysicalEntity):
            self._index("member_of", element.member_physical_entity, element.uri)
        if isinstance(element, SimplePhysicalEntity) and element.entity_reference:
            self._index("entity_reference_of", [element.entity_reference], element.uri)

    def _index(self, relation: str, targets: Iterable[str], source: str) -> None:
        bucket = self._inverse[relation]
        for target in targets:
            if source not in bucket[target]:
                bucket[target].append(source)

    def _resolve(self, uris: Iterable[str], of_type: type | None = None) -> list:
        resolved = []
        for uri in uris:
            element = self._elements.get(uri)
            if element is None:
                logger.debug("Skipping dangling reference %s", uri)
                continue
            if of_type is None or isinstance(element, of_type):
                resolved.append(element)
        return resolved

    def _inverse_of(self, relation: str, element: BioPAXElement, of_type: type | None = None) -> list:
        return self._resolve(self._inverse[relation].get(element.uri, ()), of_type)

    # ------------------------------------------------------------- interface

    def get(self, uri: str) -> BioPAXElement | None:
        return self._elements.get(uri)

    def elements(self, of_type=None):
        if of_type is None:
            return list(self._elements.values())
        return [e for e in self._elements.values() if isinstance(e, of_type)]

    def controllers(self, control):
        return self._resolve(control.controller)

    def controlled(self, control):
        return self._resolve(control.controlled)

    def controlled_of(self, element):
        return self._inverse_of("controlled_of", element, Control)

    def controller_of(self, element):
        return self._inverse_of("controller_of", element, Control)

    def left(self, conversion):
        return self._resolve(conversion.left, PhysicalEntity)

    def right(self, conversion):
        return self._resolve(conversion.right, PhysicalEntity)

    def participant_of(self, entity):
        return self._inverse_of("participant_of", entity)

    def template(self, reaction):
        if not reaction.template:
            return None
        found = self._resolve([reaction.template], PhysicalEntity)
        return found[0] if found else None

    def products(self, reaction):
        return self._resolve(reaction.product, PhysicalEntity)

    def product_of(self, entity):
        return self._inverse_of("product_of", entity, TemplateReaction)

    def components(self, complex_):
        return self._resolve(complex_.component, PhysicalEntity)

    def component_of(self, entity):
        return self._inverse_of("component_of", entity, Complex)

    def members(self, entity):
        return self._resolve(entity.member_physical_entity, PhysicalEntity)

    def member_of(self, entity):
        return self._inverse_of("member_of", entity, PhysicalEntity)

    def entity_reference(self, entity):
        if not entity.entity_reference:
            return None
        found = self._resolve([entity.entity_reference], EntityReference)
        return found[0] if found else None

    def entity_reference_of(self, reference):
        return self._inverse_of("entity_reference_of", reference, SimplePhysicalEntity)

    def pathway_components(self, pathway):
        return self._resolve(pathway.pathway_component)

    def __len__(self) -> int:
        return len(self._elements)

    # ------------------------------------------------------------ persistence

    def save(self, path: str | Path) -> None:
        """Save to JSONL with type information"""
        with open(path, "w") as f:
            for element in self._elements.values():
                record = {"type": type(element).__name__, "data": element.model_dump(mode="json")}
                f.write(json.dumps(record) + "\n")

    @classmethod
    def load(cls, path: str | Path) -> "InMemoryModel":
        """Load from JSONL with type information"""
        model = cls()
        with open(path) as f:
            for line_no, line in enumerate(f, start=1):
                if not line.strip():
                    continue
                record = json.loads(line)
                element_cls = ELEMENT_TYPES.get(record.get("type"))
                if element_cls is None:
                    raise ValueError(f"{path}:{line_no}: unknown element type {record.get('type')!r}")
                model.add(element_cls.model_validate(record["data"]))
        logger.debug("Loaded %d elements from %s", len(model), path)
        return model
