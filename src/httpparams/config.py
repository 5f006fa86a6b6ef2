"""Parameter builder configuration.

ParamsConfig is a frozen dataclass — immutable after creation, IDE-autocompletable,
no string-key dict lookups.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ParamsConfig:
    """Builder behaviour switches. Immutable after creation.

    Defaults reproduce the dispatcher's historical behaviour::

        config = ParamsConfig(preserve_staged_on_reorder=True)
        params = HttpParameters.create(raw, config=config).build()
    """

    # Builder.with_comparator() re-inserts already staged entries instead of dropping them
    preserve_staged_on_reorder: bool = False

    # Log a warning when build() yields keys that differ only by case
    warn_on_case_collisions: bool = True
