"""Error hierarchy - public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError
    │   ├── NotFoundError
    │   │   └── UnknownFlagError
    │   └── ValidationError
    │       ├── TypeMismatchError
    │       └── InvalidFlagDefinitionError
    └── ApplicationError
        ├── ForbiddenError
        │   └── FeatureDisabledError
        └── ConfigError              (mp_flags.config.validation)
            ├── MissingRequiredSettingError
            ├── UnparseableSettingError
            └── InvalidSettingValueError
                └── InvalidEnvironmentError
"""

from mp_flags.errors.base import (
    ApplicationError,
    BaseError,
    DomainError,
    ForbiddenError,
    NotFoundError,
    ValidationError,
)
from mp_flags.errors.flags import (
    FeatureDisabledError,
    InvalidFlagDefinitionError,
    TypeMismatchError,
    UnknownFlagError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "DomainError",
    "FeatureDisabledError",
    "ForbiddenError",
    "InvalidFlagDefinitionError",
    "NotFoundError",
    "TypeMismatchError",
    "UnknownFlagError",
    "ValidationError",
]
