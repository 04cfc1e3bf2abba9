"""
mp_flags – runtime feature-flag evaluation.

Import path convention::

    from mp_flags.feature_flags import FlagEngine, FlagDefinition, RolloutRule
    from mp_flags.errors import UnknownFlagError
    from mp_flags.config import FlagSettings
    from mp_flags.observability import configure_logging
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
