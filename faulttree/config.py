"""Configuration for whole-model validation."""

from dataclasses import dataclass

from faulttree.errors import SettingsError


@dataclass
class ValidationConfig:
    """Settings consumed by ``FaultTree.validate``."""

    # Basic events must carry a probability expression
    require_expressions: bool = False

    # Emit a warning for every event no gate refers to
    warn_on_orphans: bool = True

    # Violations listed in a single error message before truncation
    max_reported_errors: int = 10

    def check(self) -> None:
        """Raise SettingsError if the settings are inconsistent."""
        if self.max_reported_errors < 1:
            raise SettingsError(
                f"max_reported_errors must be at least 1, got {self.max_reported_errors}"
            )


# Global configuration instance
VALIDATION_CONFIG = ValidationConfig()
