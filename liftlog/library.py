"""
Static reference tables consumed by the fatigue model: muscles with their
recovery constants, exercises with EMG activation maps, and the exercise
tier multipliers.

The tables are owned by the caller. ``default_library()`` builds the ones
shipped in ``liftlog.reference_data``; tests and alternate exercise catalogs
construct their own ``ReferenceLibrary``.
"""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Dict, Iterable, List, Mapping, Optional

from liftlog import reference_data


@dataclass(frozen=True)
class MuscleRef:
    key: str
    name: str
    base_decay_rate: float  # % of fatigue recovered per hour
    recovery_hours: Optional[float] = None


@dataclass(frozen=True)
class ExerciseRef:
    name: str
    tier: int
    primary_muscles: Mapping[str, float]
    secondary_muscles: Mapping[str, float] = field(default_factory=dict)
    category: Optional[str] = None
    lengthening_partials: bool = False
    lengthening_multiplier: float = 1.0
    variants: tuple = ()
    variant_adjustments: Mapping[str, Mapping[str, float]] = field(default_factory=dict)

    def peak_activation(self, muscle_key: str) -> float:
        return max(self.primary_muscles.get(muscle_key, 0), self.secondary_muscles.get(muscle_key, 0))

    def to_dict(self) -> Dict[str, Any]:
        return {
            'name': self.name,
            'category': self.category,
            'tier': self.tier,
            'variants': list(self.variants),
            'primary_muscles': dict(self.primary_muscles),
            'secondary_muscles': dict(self.secondary_muscles),
            'lengthening_partials': self.lengthening_partials,
            'lengthening_multiplier': self.lengthening_multiplier,
        }


class ReferenceLibrary:
    """Name-based lookups over muscle, exercise and tier tables."""

    def __init__(
        self,
        muscles: Iterable[MuscleRef],
        exercises: Iterable[ExerciseRef],
        tier_multipliers: Mapping[int, float],
    ):
        self._muscles: Dict[str, MuscleRef] = {m.key: m for m in muscles}
        self._exercises: Dict[str, ExerciseRef] = {e.name: e for e in exercises}
        self._tier_multipliers: Dict[int, float] = dict(tier_multipliers)

    @classmethod
    def from_tables(
        cls,
        muscles_data: Iterable[Mapping[str, Any]],
        exercises_data: Iterable[Mapping[str, Any]],
        tiers_data: Mapping[int, Mapping[str, Any]],
    ) -> "ReferenceLibrary":
        muscles = [
            MuscleRef(
                key=row['key'],
                name=row.get('name', row['key']),
                base_decay_rate=float(row['decay_rate']),
                recovery_hours=row.get('recovery_hours'),
            )
            for row in muscles_data
        ]
        exercises = [
            ExerciseRef(
                name=row['name'],
                tier=int(row.get('tier', 3)),
                primary_muscles=dict(row.get('primary_muscles', {})),
                secondary_muscles=dict(row.get('secondary_muscles', {})),
                category=row.get('category'),
                lengthening_partials=bool(row.get('lengthening_partials', False)),
                lengthening_multiplier=float(row.get('lengthening_multiplier', 1.0)),
                variants=tuple(row.get('variants', ())),
                variant_adjustments={k: dict(v) for k, v in row.get('variant_adjustments', {}).items()},
            )
            for row in exercises_data
        ]
        tier_multipliers = {int(tier): float(info['multiplier']) for tier, info in tiers_data.items()}
        return cls(muscles, exercises, tier_multipliers)

    # --- Muscles ---

    @property
    def muscles(self) -> Dict[str, MuscleRef]:
        return dict(self._muscles)

    def muscle(self, key: str) -> Optional[MuscleRef]:
        return self._muscles.get(key)

    # --- Exercises ---

    def exercise(self, name: str, variant: Optional[str] = None) -> Optional[ExerciseRef]:
        """
        Looks up an exercise, applying activation adjustments for ``variant``
        when the exercise defines them. Returns None for unknown names.
        """
        base = self._exercises.get(name)
        if base is None:
            return None
        adjustments = base.variant_adjustments.get(variant) if variant else None
        if not adjustments:
            return base

        primary = dict(base.primary_muscles)
        secondary = dict(base.secondary_muscles)
        for muscle_key, delta in adjustments.items():
            if muscle_key in primary:
                primary[muscle_key] += delta
            elif muscle_key in secondary:
                secondary[muscle_key] += delta
        return replace(base, primary_muscles=primary, secondary_muscles=secondary)

    def tier_multiplier(self, tier: int) -> float:
        return self._tier_multipliers.get(tier, 1.0)

    def exercise_names(self) -> List[str]:
        return sorted(self._exercises)

    def exercises_by_category(self, category: str) -> List[str]:
        return sorted(name for name, ex in self._exercises.items() if ex.category == category)

    def exercises_for_muscle(self, muscle_key: str, min_activation: float = 50) -> List[Dict[str, Any]]:
        """Exercises hitting ``muscle_key`` at or above ``min_activation``, strongest first."""
        matches = [
            {'name': name, 'activation': ex.peak_activation(muscle_key)}
            for name, ex in self._exercises.items()
            if ex.peak_activation(muscle_key) >= min_activation
        ]
        return sorted(matches, key=lambda m: (-m['activation'], m['name']))


def default_library() -> ReferenceLibrary:
    return ReferenceLibrary.from_tables(
        reference_data.MUSCLES_DATA,
        reference_data.EXERCISES_DATA,
        reference_data.EXERCISE_TIERS,
    )
