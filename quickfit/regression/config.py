"""
Training configuration.

Defaults reproduce the reference run: Adam at learning rate 0.1 for a
fixed 250 full-batch epochs, reporting progress every 25 epochs. There
is no convergence check and no early stopping.
"""

from dataclasses import dataclass

from quickfit.core.exceptions import ValidationError
from quickfit.core.validation import check_positive

DEFAULT_EPOCHS = 250
DEFAULT_LEARNING_RATE = 0.1
DEFAULT_REPORT_EVERY = 25

# Adam moment decay rates and denominator epsilon
DEFAULT_BETA1 = 0.9
DEFAULT_BETA2 = 0.999
DEFAULT_EPSILON = 1e-7


@dataclass(frozen=True)
class TrainingConfig:
    """
    Optimizer settings for one training run.

    Attributes:
        epochs: Full-batch passes; each applies exactly one update
        learning_rate: Adam step size
        report_every: Progress is reported when epoch % report_every == 0
        beta1: Decay of the first-moment estimate
        beta2: Decay of the second-moment estimate
        epsilon: Added to the second-moment root
        seed: Seed for weight initialization and per-epoch shuffling.
            None draws fresh entropy.
    """
    epochs: int = DEFAULT_EPOCHS
    learning_rate: float = DEFAULT_LEARNING_RATE
    report_every: int = DEFAULT_REPORT_EVERY
    beta1: float = DEFAULT_BETA1
    beta2: float = DEFAULT_BETA2
    epsilon: float = DEFAULT_EPSILON
    seed: int | None = None

    def __post_init__(self):
        check_positive(self.epochs, 'epochs')
        check_positive(self.learning_rate, 'learning_rate')
        check_positive(self.report_every, 'report_every')
        check_positive(self.epsilon, 'epsilon')
        for name in ('beta1', 'beta2'):
            value = getattr(self, name)
            if not 0.0 <= value < 1.0:
                raise ValidationError(f"{name}: must be in [0, 1), got {value!r}")

    def reports_at(self, epoch: int) -> bool:
        """True if progress is reported after this 0-based epoch."""
        return epoch % self.report_every == 0
