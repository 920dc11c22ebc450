from .equitable_partition import (
    Partition,
    degree_colors,
    color_classes,
    partition_from_colors,
    same_partition,
    refinement_steps,
    equitable_partition,
)

__all__ = [
    "Partition",
    "degree_colors",
    "color_classes",
    "partition_from_colors",
    "same_partition",
    "refinement_steps",
    "equitable_partition",
]
