"""
Module: assessment.schemes

Purpose:
    Declarative layout of an assessment record: which raw fields form
    which averaged component, and which fields count directly towards the
    final score.

Key Classes:
    - ScoreComponent: Group of raw fields averaged together
    - AssessmentScheme: Components + standalone scores of one record type

Constants:
    - KNOWLEDGE_SCHEME: uh1..uh4 (daily tests), t1..t2 (assignments),
      uts (mid-term), uas (end of term)
    - SKILLS_SCHEME: perf1..3 (performance), prod1..3 (product),
      proj1..3 (project), component averages kept to one decimal

Dependencies:
    - dataclasses (std)

Used By:
    - assessment.recalculator
    - core.utils.serialization
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class ScoreComponent:
    """
    Raw fields averaged into one component score.

    Attributes:
        name: Component name, e.g. "uh"
        fields: Raw field names in input order
        output_key: Key of the average in the report payload, e.g. "uh_avg"
    """

    name: str
    fields: Tuple[str, ...]
    output_key: str

    def __post_init__(self) -> None:
        if not self.fields:
            raise ValueError(f"Component {self.name!r} has no fields")


@dataclass(frozen=True)
class AssessmentScheme:
    """
    Layout of one assessment record type (immutable).

    Attributes:
        name: Scheme name
        components: Averaged field groups, in output order
        standalone: Fields that feed the final score directly
        component_ndigits: Decimals kept on component averages
        final_ndigits: Decimals kept on the final score

    Invariants:
        - Field names are unique across components and standalone
        - Output keys are unique and do not collide with raw fields

    Example:
        >>> KNOWLEDGE_SCHEME.component_keys
        ('uh_avg', 'avg')
    """

    name: str
    components: Tuple[ScoreComponent, ...]
    standalone: Tuple[str, ...] = ()
    component_ndigits: int = 0
    final_ndigits: int = 0

    def __post_init__(self) -> None:
        """Validate scheme on construction."""
        names = self.fields
        if len(set(names)) != len(names):
            raise ValueError(f"Scheme {self.name!r} repeats a score field: {names}")
        keys = self.component_keys
        if len(set(keys)) != len(keys) or set(keys) & set(names):
            raise ValueError(f"Scheme {self.name!r} has clashing output keys: {keys}")
        if self.component_ndigits < 0 or self.final_ndigits < 0:
            raise ValueError("ndigits must be non-negative")

    @property
    def fields(self) -> Tuple[str, ...]:
        """All raw field names in input order."""
        names: Tuple[str, ...] = ()
        for component in self.components:
            names += component.fields
        return names + self.standalone

    @property
    def component_keys(self) -> Tuple[str, ...]:
        return tuple(component.output_key for component in self.components)


KNOWLEDGE_SCHEME = AssessmentScheme(
    name="knowledge",
    components=(
        ScoreComponent("uh", ("uh1", "uh2", "uh3", "uh4"), "uh_avg"),
        ScoreComponent("t", ("t1", "t2"), "avg"),
    ),
    standalone=("uts", "uas"),
)

SKILLS_SCHEME = AssessmentScheme(
    name="skills",
    components=(
        ScoreComponent("perf", ("perf1", "perf2", "perf3"), "avrg_perf"),
        ScoreComponent("prod", ("prod1", "prod2", "prod3"), "avrg_prod"),
        ScoreComponent("proj", ("proj1", "proj2", "proj3"), "avrg_proj"),
    ),
    component_ndigits=1,
)
