"""
Configuration dataclasses for recipe weighting.

These immutable config objects decouple the preference multipliers and the
normalization tolerance from function signatures, so callers can define a
standard configuration once and reuse it across recipe generations.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class WeightingConfig:
    """
    Configuration for preference re-weighting and normalization.

    Attributes:
        like_multiplier: Factor applied to a track whose mapped sound
            preference is ``"like"``. Defaults to 1.3.
        dislike_multiplier: Factor applied to a track whose mapped sound
            preference is ``"dislike"``. Defaults to 0.5.
        tolerance: Maximum allowed deviation of the normalized weight sum
            from 1.0. Defaults to 1e-9.

    Example:
        >>> config = WeightingConfig(like_multiplier=1.5)
        >>> recipe = generate_recipe("Bear", "Mind Quieter", prefs, config=config)
    """

    like_multiplier: float = 1.3
    dislike_multiplier: float = 0.5
    tolerance: float = 1e-9

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        if self.like_multiplier <= 0:
            raise ValueError(f"like_multiplier must be positive, got {self.like_multiplier}")
        if self.dislike_multiplier <= 0:
            raise ValueError(
                f"dislike_multiplier must be positive, got {self.dislike_multiplier}"
            )
        if not self.dislike_multiplier <= 1.0 <= self.like_multiplier:
            raise ValueError(
                f"multipliers must satisfy dislike ({self.dislike_multiplier}) "
                f"<= 1.0 <= like ({self.like_multiplier})"
            )
        if self.tolerance <= 0:
            raise ValueError(f"tolerance must be positive, got {self.tolerance}")


DEFAULT_WEIGHTING = WeightingConfig()
"""Default weighting: like x1.3, dislike x0.5, 1e-9 tolerance."""
